"""Application settings."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AreaRouteSettings(BaseModel):
    """Named geographic area served by one renovation contact."""

    name: str
    recipient: str
    districts: list[str] = Field(default_factory=list)
    provinces: list[str] = Field(default_factory=list)


class RoutingSettings(BaseModel):
    """Notification recipients per service type."""

    new_roof_recipients: list[str] = ["new-roof@example.com"]
    renovation_cc: list[str] = ["renovation-cc@example.com"]
    renovation_areas: list[AreaRouteSettings] = [
        AreaRouteSettings(
            name="area_a",
            recipient="renovation-area-a@example.com",
            provinces=["กรุงเทพมหานคร"],
        ),
        AreaRouteSettings(
            name="area_b",
            recipient="renovation-area-b@example.com",
            provinces=["นนทบุรี", "ปทุมธานี", "พระนครศรีอยุธยา"],
        ),
        AreaRouteSettings(
            name="area_c",
            recipient="renovation-area-c@example.com",
            provinces=["สมุทรปราการ", "ฉะเชิงเทรา", "ชลบุรี"],
        ),
    ]
    metal_roof_recipients: list[str] = [
        "metal-team-1@example.com",
        "metal-team-2@example.com",
        "metal-team-3@example.com",
    ]
    metal_roof_cc: list[str] = ["metal-cc@example.com"]


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    # Store addressing (spreadsheet id, sheet/tab name)
    spreadsheet_id: str = "lead-intake"
    sheet_name: str = "Lead"
    sheet_store: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when sheet_store=postgres
    intake_session_repository: str = "in_memory"  # in_memory or redis
    redis_url: str = "redis://localhost:6379/0"
    intake_session_ttl_seconds: int = 86400  # 24 hours default
    # Empty endpoint means the router runs in-process
    submission_endpoint_url: str = ""
    submission_timeout_seconds: float = 10.0
    submission_success_delay_ms: int = 2000
    smtp_host: str = ""  # Empty host logs e-mails instead of sending them
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_from_email: str = "leads@example.com"
    smtp_use_tls: bool = True
    email_subject_prefix: str = "SCG Lead Notification"
    other_option_values: list[str] = ["Other", "อื่นๆ"]
    routing: RoutingSettings = RoutingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        env_nested_delimiter="__",
    )


settings = Settings()
