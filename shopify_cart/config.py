"""Cart client configuration and defaults."""
import os
from typing import Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HEADERS: Dict[str, str] = {
    "X-Requested-With": "XMLHttpRequest",
    "Content-Type": "application/json;",
}

CredentialsMode = Literal["omit", "same-origin", "include"]

_TRUTHY = {"1", "true", "yes", "on"}


class PostConfig(BaseModel):
    """Request defaults applied to every mutating call."""
    model_config = ConfigDict(frozen=True)

    method: str = "POST"
    credentials: CredentialsMode = "same-origin"
    headers: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def request_options(self, body: Optional[str] = None) -> Dict[str, Any]:
        """Fresh per-request copy of the defaults, with the body attached if given."""
        options: Dict[str, Any] = {
            "method": self.method,
            "credentials": self.credentials,
            "headers": dict(self.headers),
        }
        if body:
            options["body"] = body
        return options


class CartSettings(BaseModel):
    """Effective client settings. Accepts camelCase or snake_case keys."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = ""
    post_config: PostConfig = Field(default_factory=PostConfig, alias="postConfig")
    update_state: bool = Field(default=True, alias="updateState")


SettingsInput = Union[CartSettings, Mapping[str, Any], None]


def _normalize_keys(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Map camelCase aliases onto field names, dropping unrecognized keys."""
    normalized: Dict[str, Any] = {}
    for name, field in CartSettings.model_fields.items():
        if field.alias and field.alias in overrides:
            normalized[name] = overrides[field.alias]
        if name in overrides:
            normalized[name] = overrides[name]
    return normalized


def merge_settings(overrides: SettingsInput = None) -> CartSettings:
    """
    Shallow-merge caller settings over the defaults.

    Only top-level keys are merged: a supplied post_config replaces the
    default one as a whole, so overriding one header drops the other
    default headers.

    Raises:
        pydantic.ValidationError: If a value has the wrong type
    """
    if overrides is None:
        return CartSettings()
    if isinstance(overrides, CartSettings):
        return overrides

    merged: Dict[str, Any] = {
        "url": "",
        "post_config": PostConfig(),
        "update_state": True,
    }
    merged.update(_normalize_keys(overrides))
    return CartSettings(**merged)


def settings_from_env() -> Dict[str, Any]:
    """
    Read overrides from the environment.

    SHOPIFY_CART_URL - base URL prefix (e.g. https://shop.example.com)
    SHOPIFY_CART_UPDATE_STATE - "1"/"true"/"yes"/"on" to re-read state after mutations
    """
    overrides: Dict[str, Any] = {}
    url = os.environ.get("SHOPIFY_CART_URL")
    if url is not None:
        overrides["url"] = url.rstrip("/")
    update_state = os.environ.get("SHOPIFY_CART_UPDATE_STATE")
    if update_state is not None:
        overrides["update_state"] = update_state.strip().lower() in _TRUTHY
    return overrides


__all__ = [
    "DEFAULT_HEADERS",
    "PostConfig",
    "CartSettings",
    "merge_settings",
    "settings_from_env",
]
