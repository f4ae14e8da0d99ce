"""Configuration for the wallet profiling engine."""

from typing import Dict, Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class ProfilerConfig(BaseSettings):
    """Configuration for the wallet behavioral profiling engine."""

    # Large Transfer Thresholds (token units, not base units)
    large_transfer_threshold_sol: float = Field(default=10000.0, description="Large SOL transfer threshold")
    large_usdc_threshold: float = Field(default=10000.0, description="Large USDC transfer threshold")
    large_usdt_threshold: float = Field(default=10000.0, description="Large USDT transfer threshold")

    # Reference Data
    known_entities_file: Optional[str] = Field(default=None, description="JSON file extending the known-entity table")

    # Performance Settings
    enable_parallel_processing: bool = Field(default=True, description="Enable parallel batch profiling")
    max_workers: int = Field(default=4, description="Maximum worker threads")

    # Logging Settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json|text)")
    log_file: Optional[str] = Field(default=None, description="Log file path")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = "PROFILER_"

    def get_large_thresholds(self) -> Dict[str, float]:
        """Get large transfer thresholds keyed by token symbol."""
        return {
            'SOL': self.large_transfer_threshold_sol,
            'USDC': self.large_usdc_threshold,
            'USDT': self.large_usdt_threshold
        }

    def validate_thresholds(self) -> bool:
        """Validate that every large transfer threshold is positive."""
        return all(value > 0 for value in self.get_large_thresholds().values())
