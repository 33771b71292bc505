"""Exception hierarchy for chaoticbadge."""


class ChaoticBadgeError(Exception):
    """Base exception for all chaoticbadge errors."""

    pass


class ConfigurationError(ChaoticBadgeError):
    """The renderer was set up without something it cannot work without."""

    pass


class TextMeasurementError(ConfigurationError):
    """Text could not be measured (no measurer, or its font failed to load)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Text measurement unavailable: {reason}")


class ColorFormatError(ChaoticBadgeError):
    """A color string is not a valid hex color."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid color '{value}': expected rgb or rrggbb hex digits")


class IconError(ChaoticBadgeError):
    """Errors related to badge icons."""

    pass


class IconLoadError(IconError):
    """Error loading an icon drawing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load icon '{path}': {reason}")


class GeometryError(ChaoticBadgeError):
    """Errors in geometric calculations."""

    pass


class TriangulationError(GeometryError):
    """Triangulation reached a state that a correct run never produces."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class RenderError(ChaoticBadgeError):
    """Error rendering a specific badge."""

    def __init__(self, label: str, reason: str) -> None:
        self.label = label
        self.reason = reason
        super().__init__(f"Error rendering badge '{label}': {reason}")


class ManifestError(ChaoticBadgeError):
    """A batch manifest could not be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest '{path}': {reason}")
