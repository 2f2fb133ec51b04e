"""Configuration management for freshdocs.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "freshdocs.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class CollectionConfig:
    """Content collection configuration."""

    content_dir: Path
    route_prefix: str


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    blog: CollectionConfig = field(
        default_factory=lambda: CollectionConfig(Path("blog"), "/blog"),
    )
    changelog: CollectionConfig = field(
        default_factory=lambda: CollectionConfig(Path("changelogs"), "/changelogs"),
    )
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for freshdocs.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            blog=cls._parse_collection(
                "blog", data.get("blog"), config_dir, "blog", "/blog"
            ),
            changelog=cls._parse_collection(
                "changelog", data.get("changelog"), config_dir, "changelogs", "/changelogs"
            ),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_collection(
        cls,
        section: str,
        data: object,
        config_dir: Path,
        default_dir: str,
        default_prefix: str,
    ) -> CollectionConfig:
        """Parse a content collection section ([blog] or [changelog]).

        Args:
            section: Section name, used in error messages
            data: Raw section data
            config_dir: Directory containing config file (for relative paths)
            default_dir: Content directory used when the key is missing
            default_prefix: Route prefix used when the key is missing

        Returns:
            CollectionConfig instance
        """
        if data is None:
            return CollectionConfig(config_dir / default_dir, default_prefix)

        if not isinstance(data, dict):
            raise ValueError(f"{section} section must be a dictionary")

        content_dir = data.get("content_dir", default_dir)
        if not isinstance(content_dir, str):
            raise ValueError(f"{section}.content_dir must be a string")

        route_prefix = data.get("route_prefix", default_prefix)
        if not isinstance(route_prefix, str):
            raise ValueError(f"{section}.route_prefix must be a string")
        if not route_prefix.startswith("/"):
            raise ValueError(f"{section}.route_prefix must start with '/'")

        return CollectionConfig(config_dir / content_dir, route_prefix)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        blog_dir: Path | None = None,
        changelog_dir: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            blog_dir: Override blog.content_dir
            changelog_dir: Override changelog.content_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        blog = self.blog
        if blog_dir is not None:
            blog = replace(self.blog, content_dir=blog_dir)

        changelog = self.changelog
        if changelog_dir is not None:
            changelog = replace(self.changelog, content_dir=changelog_dir)

        return replace(self, server=server, blog=blog, changelog=changelog)
