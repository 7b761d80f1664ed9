"""Runtime settings for the tracking wrapper.

Uses Pydantic Settings for automatic env var loading:
    TRACK_EVENT_ENABLED=false
    TRACK_EVENT_SINK_ERROR_POLICY=log
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from track_event.core.config.enums import SinkErrorPolicy


class Settings(BaseSettings):
    """Behavior flags shared by every wrapped method.

    Read at call time, so changing a value affects methods that were
    decorated before the change.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRACK_EVENT_",
        extra="ignore",
    )

    ENABLED: bool = Field(True, description="Dispatch tracking payloads at all")
    TRACK_ON_SYNC_ERROR: bool = Field(
        False, description="Dispatch tracking when the method raises synchronously"
    )
    SINK_ERROR_POLICY: SinkErrorPolicy = Field(
        SinkErrorPolicy.RAISE, description="How failures raised by the sink are handled"
    )
    REQUIRE_SINK: bool = Field(
        False, description="Raise instead of skipping when the context has no sink"
    )
