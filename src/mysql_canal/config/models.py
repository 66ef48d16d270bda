"""
Configuration models for the canal client using Pydantic.

This module defines the configuration models that validate and parse
the canal configuration document: connection settings, replication
identity, table filters and the optional mysqldump snapshot step.

Every field has a zero value (empty string, 0, False, empty list, zero
duration, no location) so that keys missing from a document never fail
a load. Scalar fields are strict: a quoted number is not accepted where
an integer is expected.
"""

from datetime import timedelta, tzinfo
from typing import Annotated, List, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
)

from mysql_canal.constants import MAX_SERVER_ID
from mysql_canal.utils import (
    duration_from_nanoseconds,
    format_duration,
    location_name,
    parse_duration,
    resolve_location,
)


def _coerce_duration(value):
    """Accept a duration string, integer nanoseconds or a timedelta."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, str):
        return parse_duration(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return duration_from_nanoseconds(value)
    raise ValueError(
        f"duration must be a string like '5s' or an integer of nanoseconds, "
        f"got {type(value).__name__}"
    )


def _coerce_location(value):
    """Accept a time zone name, a named tzinfo (ZoneInfo) or None."""
    if value is None:
        return value
    if isinstance(value, tzinfo):
        # only named zones can be written out and read back
        location_name(value)
        return value
    if isinstance(value, str):
        return resolve_location(value)
    raise ValueError(
        f"timestamp location must be a time zone name, got {type(value).__name__}"
    )


Duration = Annotated[timedelta, BeforeValidator(_coerce_duration)]
Location = Annotated[Optional[tzinfo], BeforeValidator(_coerce_location)]


class DumpConfig(BaseModel):
    """
    Configuration for the mysqldump snapshot taken before streaming.

    When tables is non-empty it overrides databases, and every listed table
    is read from table_database. An empty tool_path disables the snapshot.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # mysqldump execution path, like mysqldump or /usr/bin/mysqldump
    tool_path: StrictStr = Field(default="", alias="mysqldump")

    tables: List[StrictStr] = Field(default_factory=list, alias="tables")
    table_database: StrictStr = Field(default="", alias="table_db")

    databases: List[StrictStr] = Field(default_factory=list, alias="dbs")

    # db.table
    ignore_tables: List[StrictStr] = Field(default_factory=list, alias="ignore_tables")

    # passed verbatim to --where, quotes are mandatory
    where_clause: StrictStr = Field(default="", alias="where")

    discard_error_output: StrictBool = Field(default=False, alias="discard_err")

    # skip --master-data when FLUSH TABLES WITH READ LOCK is not permitted
    skip_master_data: StrictBool = Field(default=False, alias="skip_master_data")

    # MySQL mysqldump takes --set-gtid-purged, MariaDB uses --gtid instead.
    # "auto" when the server supports GTID, "none" for file-position replication.
    gtid_purged_mode: StrictStr = Field(default="", alias="set_gtid_purged")

    max_allowed_packet_mb: StrictInt = Field(default=0, alias="max_allowed_packet_mb")

    protocol: StrictStr = Field(default="", alias="protocol")

    extra_options: List[StrictStr] = Field(default_factory=list, alias="extra_options")

    @property
    def enabled(self) -> bool:
        """Whether a snapshot should be taken before streaming."""
        return bool(self.tool_path)

    @property
    def uses_table_selection(self) -> bool:
        """Whether tables/table_database select the snapshot scope instead of databases."""
        return bool(self.tables)


class CanalConfig(BaseModel):
    """Root configuration model for the canal client."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    address: StrictStr = Field(default="", alias="addr")
    user: StrictStr = Field(default="", alias="user")
    password: StrictStr = Field(default="", alias="password")

    charset: StrictStr = Field(default="", alias="charset")
    # must be unique among clients replicating from the same server; 0 means unset
    server_id: StrictInt = Field(default=0, ge=0, le=MAX_SERVER_ID, alias="server_id")
    flavor: StrictStr = Field(default="", alias="flavor")
    heartbeat_period: Duration = Field(default=timedelta(0), alias="heartbeat_period")
    read_timeout: Duration = Field(default=timedelta(0), alias="read_timeout")

    # Patterns are matched against "db.table". A table is processed when it
    # matches an include pattern (or there are none) and no exclude pattern.
    # e.g. include [".*\\.canal"], exclude ["mysql\\..*"] takes every database's
    # canal table except the one in database mysql.
    include_table_regex: List[StrictStr] = Field(
        default_factory=list, alias="include_table_regex"
    )
    exclude_table_regex: List[StrictStr] = Field(
        default_factory=list, alias="exclude_table_regex"
    )

    discard_no_meta_row_event: StrictBool = Field(
        default=False, alias="discard_no_meta_row_event"
    )

    dump: DumpConfig = Field(default_factory=DumpConfig, alias="dump")

    use_decimal: StrictBool = Field(default=False, alias="use_decimal")
    parse_time: StrictBool = Field(default=False, alias="parse_time")

    timestamp_string_location: Location = Field(
        default=None, alias="timestamp_string_location"
    )

    semi_sync_enabled: StrictBool = Field(default=False, alias="semi_sync_enabled")

    # attempts to re-establish a broken connection, 0 leaves the client default
    max_reconnect_attempts: StrictInt = Field(default=0, alias="max_reconnect_attempts")

    @field_serializer("heartbeat_period", "read_timeout", when_used="json")
    def serialize_duration(self, value: timedelta) -> str:
        return format_duration(value)

    @field_serializer("timestamp_string_location", when_used="json")
    def serialize_location(self, value: Optional[tzinfo]) -> Optional[str]:
        if value is None:
            return None
        return location_name(value)


class LoggingConfig(BaseModel):
    """Configuration for logging settings."""

    level: str = Field(default="INFO")
    format: str = Field(default="text")  # "text" or "json"
    log_to_file: bool = Field(default=False)
    log_file_path: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        """Validate logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(
                f"Invalid logging level: {v}. Must be one of {valid_levels}"
            )
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v):
        """Validate logging format."""
        valid_formats = ["text", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(
                f"Invalid logging format: {v}. Must be one of {valid_formats}"
            )
        return v.lower()
