"""Typed views of Simplifier REST payloads."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SourceOrTargetInfo(BaseModel):
    id: int
    name: str


class LoginMethodTypeInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    technical_name: str = Field(alias="technicalName")
    i18n: Optional[str] = None
    description_i18n: Optional[str] = Field(default=None, alias="descriptionI18n")
    sources: List[SourceOrTargetInfo] = Field(default_factory=list)
    targets: List[SourceOrTargetInfo] = Field(default_factory=list)
    supported_connectors: List[str] = Field(default_factory=list, alias="supportedConnectors")

    def source_name(self, source_id: int) -> str:
        return next((s.name for s in self.sources if s.id == source_id), "UNKNOWN")

    def target_name(self, target_id: int) -> str:
        return next((t.name for t in self.targets if t.id == target_id), "UNKNOWN")


class LoginMethodSummary(BaseModel):
    """Entry of the login method list. Carries updateInfo, unlike the details view."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    description: str = ""
    login_method_type: LoginMethodTypeInfo = Field(alias="loginMethodType")
    update_info: Optional[Dict[str, Any]] = Field(default=None, alias="updateInfo")


class LoginMethodDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    description: str = ""
    login_method_type: LoginMethodTypeInfo = Field(alias="loginMethodType")
    source: int
    target: int
    source_configuration: Dict[str, Any] = Field(default_factory=dict, alias="sourceConfiguration")
    target_configuration: Optional[Dict[str, Any]] = Field(
        default=None, alias="targetConfiguration"
    )
    configuration: Dict[str, Any] = Field(default_factory=dict)


class OAuth2Client(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    description: str = ""
    mechanism: str = "OAuth2"
    has_icon: bool = Field(default=False, alias="hasIcon")
