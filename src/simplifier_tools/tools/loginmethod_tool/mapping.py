"""
Source/target mapping contract for login methods.

A login method stores *where* its credential comes from (the source) and
*how* it is sent on outbound calls (the target) as small integers plus a
configuration object whose shape depends on the login method kind. The
mappers translate the semantic parameters an agent passes into that form.

Mapping is pure: no I/O and no shared mutable state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, TypeVar, Union


class LoginMethodValidationError(ValueError):
    """Raised when parameters do not fit the chosen source or target kind."""
    pass


class LoginMethodKind(str, Enum):
    USER_CREDENTIALS = "UserCredentials"
    OAUTH2 = "OAuth2"
    TOKEN = "Token"
    SINGLE_SIGN_ON = "SingleSignOn"


class SourceKind(str, Enum):
    DEFAULT = "Default"
    PROVIDED = "Provided"
    REFERENCE = "Reference"
    SYSTEM_REFERENCE = "SystemReference"
    PROFILE_REFERENCE = "ProfileReference"
    USER_ATTRIBUTE_REFERENCE = "UserAttributeReference"

    @property
    def code(self) -> int:
        return SOURCE_CODES[self]


class TargetKind(str, Enum):
    DEFAULT = "Default"
    CUSTOM_HEADER = "CustomHeader"
    QUERY_PARAMETER = "QueryParameter"

    @property
    def code(self) -> int:
        return TARGET_CODES[self]


# Stable codes understood by the Simplifier platform
SOURCE_CODES: Dict[SourceKind, int] = {
    SourceKind.DEFAULT: 0,
    SourceKind.PROVIDED: 1,
    SourceKind.REFERENCE: 2,
    SourceKind.SYSTEM_REFERENCE: 3,
    SourceKind.PROFILE_REFERENCE: 4,
    SourceKind.USER_ATTRIBUTE_REFERENCE: 5,
}

TARGET_CODES: Dict[TargetKind, int] = {
    TargetKind.DEFAULT: 0,
    TargetKind.CUSTOM_HEADER: 1,
    TargetKind.QUERY_PARAMETER: 2,
}


@dataclass(frozen=True)
class SourceMapping:
    source: int
    source_configuration: Dict[str, Any]

    def to_request(self) -> Dict[str, Any]:
        return {"source": self.source, "sourceConfiguration": self.source_configuration}


@dataclass(frozen=True)
class TargetMapping:
    target: int
    target_configuration: Optional[Dict[str, Any]] = None

    def to_request(self) -> Dict[str, Any]:
        request: Dict[str, Any] = {"target": self.target}
        if self.target_configuration is not None:
            request["targetConfiguration"] = self.target_configuration
        return request


@dataclass(frozen=True)
class SourceRule:
    """One supported source kind: the fields it needs and the configuration it produces."""

    required: Tuple[str, ...]
    build: Callable[[Mapping[str, Any]], Dict[str, Any]]
    rotation_flag: Optional[str] = None
    """Change flag sent alongside the secret, on update only."""


@dataclass(frozen=True)
class TargetRule:
    required_field: Optional[str] = None
    config_key: Optional[str] = None


_E = TypeVar("_E", bound=Enum)


def _raw(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _coerce(enum_type: Type[_E], value: Any) -> Optional[_E]:
    try:
        return enum_type(_raw(value))
    except ValueError:
        return None


def _describe_fields(fields: Tuple[str, ...]) -> str:
    quoted = [f"'{f}'" for f in fields]
    if len(quoted) == 1:
        return f"{quoted[0]} field"
    return f"{', '.join(quoted[:-1])} and {quoted[-1]} fields"


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class TargetAndSourceMapper(ABC):
    """
    Maps source/target kinds plus parameters for one login method kind.

    Subclasses set kind, label and default_source_kind as class attributes
    and declare their tables; the behaviour lives here:
    - an unsupported source kind is an error,
    - an unsupported target kind silently falls back to Default (0),
    - secret sources carry their change flag only when an existing login
      method is passed (the update path).
    """

    @property
    @abstractmethod
    def kind(self) -> LoginMethodKind: ...

    @property
    @abstractmethod
    def label(self) -> str: ...

    @property
    @abstractmethod
    def default_source_kind(self) -> SourceKind: ...

    source_rules: Mapping[SourceKind, SourceRule] = {}
    target_rules: Mapping[TargetKind, TargetRule] = {}

    def get_default_source_kind(self) -> SourceKind:
        return self.default_source_kind

    def map_source(
        self,
        source_type: Union[SourceKind, str],
        params: Mapping[str, Any],
        existing: Optional[Mapping[str, Any]] = None,
    ) -> SourceMapping:
        source_kind = _coerce(SourceKind, source_type)
        rule = self.source_rules.get(source_kind) if source_kind is not None else None
        if source_kind is None or rule is None:
            raise LoginMethodValidationError(
                f"Unsupported sourceType for {self.label}: {_raw(source_type)}"
            )

        if any(_is_missing(params.get(name)) for name in rule.required):
            raise LoginMethodValidationError(
                f"{self.label} {source_kind.value} source requires "
                f"{_describe_fields(rule.required)}"
            )

        configuration = rule.build(params)
        if existing is not None and rule.rotation_flag:
            configuration[rule.rotation_flag] = params.get(rule.rotation_flag, False)
        return SourceMapping(source_kind.code, configuration)

    def map_target(
        self,
        target_type: Union[TargetKind, str, None],
        params: Mapping[str, Any],
    ) -> TargetMapping:
        target_kind = _coerce(TargetKind, target_type) if target_type is not None else None
        rule = self.target_rules.get(target_kind) if target_kind is not None else None
        if target_kind is None or rule is None:
            return TargetMapping(TargetKind.DEFAULT.code)

        if rule.required_field is None:
            return TargetMapping(target_kind.code)

        value = params.get(rule.required_field)
        if _is_missing(value):
            raise LoginMethodValidationError(
                f"{self.label} {target_kind.value} target requires "
                f"{_describe_fields((rule.required_field,))}"
            )
        return TargetMapping(target_kind.code, {rule.config_key: value})
