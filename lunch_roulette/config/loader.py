"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment, build_settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def env_file_for(environment: str, base_dir: Path = Path(".")) -> Path:
        """Path of the .env file belonging to an environment"""
        env = Environment(environment.lower())
        return base_dir / f".env.{env.value}"

    @staticmethod
    def load_environment_config(
        environment: Optional[str] = None,
        base_dir: Path = Path("."),
    ) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development
            base_dir: Directory holding the .env.<environment> files

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env_file_path = ConfigLoader.env_file_for(environment, base_dir)

        if env_file_path.exists():
            return build_settings(str(env_file_path))

        logger.warning(
            f"Environment file {env_file_path} not found, using default settings"
        )
        return Settings(environment=environment)

    @staticmethod
    def get_available_environments(base_dir: Path = Path(".")) -> list[str]:
        """Get list of available environment configurations"""
        env_names = []
        for env_file in base_dir.glob(".env.*"):
            env_name = env_file.name.replace(".env.", "", 1)
            if env_name in {e.value for e in Environment}:
                env_names.append(env_name)
        return sorted(env_names)

    @staticmethod
    def validate_environment_config(
        environment: str,
        base_dir: Path = Path("."),
    ) -> bool:
        """
        Validate that an environment configuration exists and is valid.

        Args:
            environment: Environment name to validate
            base_dir: Directory holding the .env.<environment> files

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            if not ConfigLoader.env_file_for(environment, base_dir).exists():
                return False

            settings = ConfigLoader.load_environment_config(environment, base_dir)
        except ValueError as e:
            logger.warning(f"Invalid configuration for '{environment}': {e}")
            return False

        # The upstream search cannot work without a subscription key
        return bool(settings.azure_maps.subscription_key)

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        defaults = Settings()

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={defaults.app_name}
APP_VERSION={defaults.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={defaults.host}
PORT={defaults.port}
RELOAD={'true' if env == Environment.DEVELOPMENT else 'false'}
WORKERS={1 if env == Environment.DEVELOPMENT else 4}

# Logging Configuration
LOG_LEVEL={defaults.log_level.value}
LOG_FORMAT={'text' if env == Environment.DEVELOPMENT else 'json'}

# Azure Maps Configuration
AZURE_MAPS_SUBSCRIPTION_KEY=your-azure-maps-key-here
AZURE_MAPS_BASE_URL={defaults.azure_maps.base_url}
AZURE_MAPS_API_VERSION={defaults.azure_maps.api_version}

# Search Policy Configuration
SEARCH_QUERY_TERM={defaults.search.query_term}
SEARCH_MIN_SCORE={defaults.search.min_score}
SEARCH_REQUIRED_CATEGORY={defaults.search.required_category}
"""

        with open(output_path, "w") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
