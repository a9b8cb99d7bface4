"""Template component of the package."""


class TemplatePackage:
    """The main type of the package template."""

    @property
    def stanford(self) -> str:
        """The package template is provided by Stanford University."""
        return "Stanford University"
