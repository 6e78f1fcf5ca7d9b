"""API variants and compiler configuration."""

from dataclasses import dataclass
from enum import StrEnum


class ApiVariant(StrEnum):
    """Target styling API the expression tree is written against."""

    PLAIN = "plain"
    TYPED = "typed"


@dataclass(frozen=True, slots=True)
class CompileOptions:
    """Settings held fixed for one compilation unit."""

    variant: ApiVariant = ApiVariant.PLAIN

    def __post_init__(self):
        if not isinstance(self.variant, ApiVariant):
            object.__setattr__(self, "variant", ApiVariant(self.variant))

    @property
    def is_plain(self) -> bool:
        return self.variant == ApiVariant.PLAIN

    @property
    def is_typed(self) -> bool:
        return self.variant == ApiVariant.TYPED

    @property
    def selector_callee(self) -> str:
        return "select" if self.is_typed else "selector"

    @staticmethod
    def for_variant(variant: ApiVariant | str) -> "CompileOptions":
        return CompileOptions(variant=ApiVariant(variant))
