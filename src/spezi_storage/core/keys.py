"""
Storage Keys - constants used to address values in app storage.

The literal values are lookup keys into persisted storage. Changing one
orphans whatever was stored under the old key, so they never change.
"""

from enum import Enum

from spezi_storage.core.exceptions import UnknownKeyError


class StorageKeys(str, Enum):
    """Keys shared across the application to access app storage."""

    # Bool flag indicating the onboarding was completed.
    ONBOARDING_FLOW_COMPLETE = "onboardingFlow.complete"
    # Bool flag indicating the local LLM onboarding was completed.
    LOCAL_ONBOARDING_FLOW_COMPLETE = "localOnboardingFlow.complete"
    # Bool flag indicating the fog LLM onboarding was completed.
    FOG_ONBOARDING_FLOW_COMPLETE = "fogOnboardingFlow.complete"

    def __str__(self) -> str:
        return self.value


ONBOARDING_FLOW_COMPLETE: str = StorageKeys.ONBOARDING_FLOW_COMPLETE.value
LOCAL_ONBOARDING_FLOW_COMPLETE: str = StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE.value
FOG_ONBOARDING_FLOW_COMPLETE: str = StorageKeys.FOG_ONBOARDING_FLOW_COMPLETE.value

ONBOARDING_KEYS: tuple[StorageKeys, ...] = (
    StorageKeys.ONBOARDING_FLOW_COMPLETE,
    StorageKeys.LOCAL_ONBOARDING_FLOW_COMPLETE,
    StorageKeys.FOG_ONBOARDING_FLOW_COMPLETE,
)


def all_keys() -> dict[str, str]:
    """Return symbolic name -> literal for every registered key."""
    return {key.name: key.value for key in StorageKeys}


def lookup_key(name: str) -> StorageKeys:
    """
    Resolve a key given at runtime.

    Accepts the symbolic name in any case (``onboarding_flow_complete``)
    or the literal value itself (``onboardingFlow.complete``).

    Raises:
        UnknownKeyError: If the name is not registered
    """
    if isinstance(name, StorageKeys):
        return name

    candidate = name.strip()
    member = StorageKeys.__members__.get(candidate.upper().replace("-", "_"))
    if member is not None:
        return member

    for key in StorageKeys:
        if key.value == candidate:
            return key

    raise UnknownKeyError(
        f"Storage key '{name}' is not registered",
        name=name,
        known=list(StorageKeys.__members__),
    )
