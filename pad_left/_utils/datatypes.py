from typing import (
    Any,
    Optional,
    Type,
    TypeVar,
)

TConfigurable = TypeVar("TConfigurable", bound="Configurable")


class Configurable:
    """
    Base class for simple inline subclassing
    """

    @classmethod
    def configure(
        cls: Type[TConfigurable], __name__: Optional[str] = None, **overrides: Any
    ) -> Type[TConfigurable]:
        if __name__ is None:
            __name__ = cls.__name__

        for key in overrides:
            if not hasattr(cls, key):
                raise TypeError(
                    f"The {cls.__name__}.configure cannot set attributes that are not "
                    f"already present on the base class. The attribute `{key}` was "
                    f"not found on the base class `{cls}`"
                )

        return type(__name__, (cls,), overrides)
