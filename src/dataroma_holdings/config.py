"""Application configuration helpers."""
from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping


DEFAULT_HOMEPAGE_URL = "https://www.dataroma.com/m/home.php"
DEFAULT_SITE_ORIGIN = "https://www.dataroma.com"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/141.0.0.0 Safari/537.36"
)


def _resolve_env_file(candidate: str) -> Path | None:
    """Return the first matching environment file path if it exists."""

    path = Path(candidate)
    if path.is_absolute():
        return path if path.exists() else None

    search_roots = [Path.cwd(), Path(__file__).resolve().parent]
    search_roots.extend(Path(__file__).resolve().parents)

    seen: set[Path] = set()
    for root in search_roots:
        root = root.resolve()
        if root in seen:
            continue
        seen.add(root)
        potential = root / candidate
        if potential.exists():
            return potential
    return None


def _parse_env_file(path: Path) -> dict[str, str]:
    """Parse a dotenv-style file into a mapping."""

    variables: dict[str, str] = {}
    for raw_line in path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        variables[key.strip()] = value.strip().strip('"').strip("'")
    return variables


def _load_profile_env(env: Mapping[str, str]) -> dict[str, str]:
    """Load environment variables from the selected profile file."""

    explicit_file = env.get("DATAROMA_ENV_FILE")
    candidate = explicit_file or f".env.{env.get('DATAROMA_ENV', 'local')}"
    path = _resolve_env_file(candidate)
    if path is None:
        return {}
    return _parse_env_file(path)


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"DATAROMA_REQUEST_TIMEOUT must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise RuntimeError("DATAROMA_REQUEST_TIMEOUT must be greater than zero")
    return timeout


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    homepage_url: str = DEFAULT_HOMEPAGE_URL
    site_origin: str = DEFAULT_SITE_ORIGIN
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @staticmethod
    def load(env: Mapping[str, str] | None = None) -> "Settings":
        """Load settings from environment variables."""

        base_env = dict(os.environ if env is None else env)
        file_env = _load_profile_env(base_env)
        # Environment variables set in the shell take precedence over the file.
        merged_env = {**file_env, **base_env}

        return Settings(
            homepage_url=merged_env.get("DATAROMA_HOMEPAGE_URL") or DEFAULT_HOMEPAGE_URL,
            site_origin=(merged_env.get("DATAROMA_SITE_ORIGIN") or DEFAULT_SITE_ORIGIN).rstrip("/"),
            request_timeout=_parse_timeout(merged_env.get("DATAROMA_REQUEST_TIMEOUT")),
            user_agent=merged_env.get("DATAROMA_USER_AGENT") or DEFAULT_USER_AGENT,
        )


__all__ = ["Settings", "DEFAULT_HOMEPAGE_URL", "DEFAULT_SITE_ORIGIN"]
