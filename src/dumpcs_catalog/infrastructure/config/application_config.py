#!/usr/bin/env python3

"""Configuration management for the dump catalog tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Configuration for the dump catalog tool."""

    dump_file_path: Path
    output_dir: Path
    verbose: bool = False
    log_dir: Path = Path("logs")
    binary_path: Optional[Path] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        dump_file_path = Path(os.getenv("DUMP_FILE_PATH", "dump.cs"))
        output_dir = Path(os.getenv("OUTPUT_DIR", "output"))
        verbose = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
        binary_str = os.getenv("BINARY_PATH")

        return cls(
            dump_file_path=dump_file_path,
            output_dir=output_dir,
            verbose=verbose,
            binary_path=Path(binary_str) if binary_str else None,
        )

    @classmethod
    def from_args(
        cls,
        dump_file_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        verbose: Optional[bool] = None,
        binary_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            dump_file_path: Path to dump.cs (overrides env)
            output_dir: Output directory (overrides env)
            verbose: Enable verbose output (overrides env)
            binary_path: Native library used to annotate addresses (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if dump_file_path is not None:
            config.dump_file_path = dump_file_path
        if output_dir is not None:
            config.output_dir = output_dir
        if verbose is not None:
            config.verbose = verbose
        if binary_path is not None:
            config.binary_path = binary_path

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.dump_file_path.exists():
            raise ValueError(f"Dump file not found: {self.dump_file_path}")

        if not self.dump_file_path.is_file():
            raise ValueError(f"Not a file: {self.dump_file_path}")

        if self.binary_path is not None and not self.binary_path.is_file():
            raise ValueError(f"Binary file not found: {self.binary_path}")

    def ensure_output_dir(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def ensure_log_dir(self) -> None:
        """Create the log directory if it doesn't exist."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
