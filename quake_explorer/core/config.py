"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from quake_explorer.core.explorer import TimeRange


# USGS summary feeds, one per time range
USGS_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

# OpenStreetMap tile server used for rendered maps
DEFAULT_TILE_URL = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_base_url: Base URL of the summary feeds (all_<range>.geojson is appended)
        default_time_range: Feed window loaded on startup
        request_timeout_seconds: HTTP timeout for a single feed fetch
        default_min_magnitude: Initial minimum magnitude filter
        map_width: Rendered map width in pixels
        map_height: Rendered map height in pixels
        tile_url: Tile URL template for rendered maps
    """
    feed_base_url: str = USGS_FEED_BASE
    default_time_range: str = TimeRange.DAY.value
    request_timeout_seconds: int = 30
    default_min_magnitude: float = 0.0
    map_width: int = 800
    map_height: int = 500
    tile_url: str = DEFAULT_TILE_URL


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    # Loaded configs fail earlier in parse_time_range; this catches
    # Config objects constructed directly.
    valid_ranges = {t.value for t in TimeRange}
    if config.default_time_range not in valid_ranges:
        errors.append(ValidationError(
            field="default_time_range",
            message=(
                f"Unknown time range '{config.default_time_range}', "
                f"expected one of {sorted(valid_ranges)}"
            ),
        ))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message=f"Timeout must be positive, got {config.request_timeout_seconds}",
        ))

    if config.default_min_magnitude < 0:
        errors.append(ValidationError(
            field="default_min_magnitude",
            message=f"Minimum magnitude cannot be negative, got {config.default_min_magnitude}",
        ))

    for name in ("map_width", "map_height"):
        value = getattr(config, name)
        if value <= 0:
            errors.append(ValidationError(
                field=name,
                message=f"Map size must be positive, got {value}",
            ))

    if not config.feed_base_url.startswith(("http://", "https://")):
        errors.append(ValidationError(
            field="feed_base_url",
            message="Feed URL does not look like an HTTP URL",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
