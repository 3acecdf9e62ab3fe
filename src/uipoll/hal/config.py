"""HAL configuration management.

Picks the libraries behind the default recognition engine. Every field can
be overridden with a ``UIPOLL_*`` environment variable, for example
``UIPOLL_MONITOR=1`` to capture the second display.
"""

import os
from dataclasses import asdict, dataclass, field
from typing import Any

# Backend kind -> names the factory knows how to build
SUPPORTED_BACKENDS: dict[str, tuple[str, ...]] = {
    "capture": ("mss",),
    "input": ("pyautogui",),
    "matcher": ("opencv",),
    "ocr": ("easyocr",),
}


def _env_str(name: str, default: str) -> Any:
    return field(default_factory=lambda: os.getenv(name, default))


def _env_int(name: str, default: int) -> Any:
    return field(default_factory=lambda: int(os.getenv(name, str(default))))


def _env_flag(name: str) -> Any:
    return field(default_factory=lambda: os.getenv(name, "false").lower() in ("1", "true", "yes"))


@dataclass
class HALConfig:
    """Backend selection for the default recognition engine.

    Fields are read from the environment when the instance is created, so
    tests can monkeypatch ``UIPOLL_*`` variables and build a fresh config.
    """

    capture_backend: str = _env_str("UIPOLL_CAPTURE_BACKEND", "mss")
    input_backend: str = _env_str("UIPOLL_INPUT_BACKEND", "pyautogui")
    matcher_backend: str = _env_str("UIPOLL_MATCHER_BACKEND", "opencv")
    ocr_backend: str = _env_str("UIPOLL_OCR_BACKEND", "easyocr")

    # 0 is the primary display
    monitor: int = _env_int("UIPOLL_MONITOR", 0)
    matcher_threads: int = _env_int("UIPOLL_MATCHER_THREADS", 4)
    ocr_gpu_enabled: bool = _env_flag("UIPOLL_OCR_GPU_ENABLED")

    def validate(self) -> bool:
        """Check backend names and numeric limits.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If a backend is unknown or a number is out of range
        """
        for kind, supported in SUPPORTED_BACKENDS.items():
            selected = getattr(self, f"{kind}_backend")
            if selected not in supported:
                raise ValueError(
                    f"Invalid {kind} backend: {selected} (supported: {', '.join(supported)})"
                )

        if self.monitor < 0:
            raise ValueError("Monitor index must be non-negative")
        if self.matcher_threads < 1:
            raise ValueError("Matcher threads must be at least 1")

        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"HALConfig(capture={self.capture_backend}, input={self.input_backend}, "
            f"matcher={self.matcher_backend}, ocr={self.ocr_backend}, monitor={self.monitor})"
        )


_config: HALConfig | None = None


def get_config() -> HALConfig:
    """Get the process-wide HAL configuration, creating it on first use."""
    global _config
    if _config is None:
        _config = HALConfig()
        _config.validate()
    return _config


def set_config(config: HALConfig) -> None:
    """Replace the process-wide HAL configuration.

    Raises:
        ValueError: If ``config`` does not validate
    """
    global _config
    config.validate()
    _config = config


def reset_config() -> None:
    """Forget the process-wide configuration; the next ``get_config`` rereads the environment."""
    global _config
    _config = None
