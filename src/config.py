"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class GameConfig:
    """Configuration for an interactive game."""
    mode: str = "pvc"  # 'pvp', 'pvc' or 'cvc'
    human_color: str = "black"
    cpu_delay: float = 0.7  # Seconds the CPU appears to think before moving


@dataclass
class ArenaConfig:
    """Configuration for automated CPU-vs-CPU series."""
    num_games: int = 100
    swap_colors: bool = True  # Alternate which player takes black
    output_dir: str = "arena_results"
    results_file: str = "arena_results.json"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    seed: Optional[int] = None
    game: GameConfig = field(default_factory=GameConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            seed=config_dict.get('seed'),
            game=GameConfig(**config_dict.get('game', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
