"""Configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kindle.models.request import DEFAULT_USER_NAME, VMType


USER_CERTS_TARGET_PATH = "/etc/containers/certs.d"


class KindleConfig(BaseModel):
    """Tool configuration."""
    log_level: str = Field(default="INFO")
    default_user: str = Field(default=DEFAULT_USER_NAME)
    vm_type: VMType = Field(default=VMType.QEMU)
    certs_target_path: str = Field(default=USER_CERTS_TARGET_PATH)

    model_config = ConfigDict(extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("vm_type", mode="before")
    @classmethod
    def normalize_vm_type(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("certs_target_path")
    @classmethod
    def validate_certs_target_path(cls, v):
        """Certificates land on the Linux guest, so the path must be absolute POSIX."""
        if not v.startswith("/"):
            raise ValueError(f"certs_target_path must be absolute: {v}")
        return v.rstrip("/") or "/"
