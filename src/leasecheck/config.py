"""
Settings for the lease check engine.

Settings live in a YAML file shipped with the package. A different file can be
used by pointing LEASECHECK_CONFIG at it (a .env file in the working directory
is read first).
"""

import os
from dataclasses import dataclass, field
from fractions import Fraction
from pathlib import Path
from typing import Dict, Optional

import dotenv
import yaml

from .exceptions import ConfigurationError
from .models import InstrumentType

dotenv.load_dotenv()

DEFAULT_CONFIG_FILE = Path(__file__).parent / "data" / "leasecheck.yaml"


@dataclass(frozen=True)
class StatusLabels:
    leased: str = "Appears Leased"
    leased_pugh_limited: str = "Appears Leased (Pugh-limited)"
    open: str = "Appears Open"


@dataclass(frozen=True)
class Settings:
    """Read-only engine settings"""
    default_total_acres: float = 160
    zero_epsilon: Fraction = Fraction(1, 10**9)
    fuzzy_type_threshold: float = 90
    status_labels: StatusLabels = field(default_factory=StatusLabels)
    instrument_type_aliases: Dict[str, InstrumentType] = field(default_factory=dict)


def _load_yaml(config_file: Path) -> dict:
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Settings file '{config_file}' not found!")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing settings YAML file: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file '{config_file}' must contain a mapping")
    return data


def _load_aliases(raw_aliases: dict) -> Dict[str, InstrumentType]:
    aliases = {}
    for label, type_name in (raw_aliases or {}).items():
        try:
            aliases[str(label).strip().lower()] = InstrumentType(type_name)
        except ValueError:
            raise ConfigurationError(
                f"Unknown instrument type '{type_name}' for alias '{label}'"
            )
    return aliases


def load_settings(config_file: Optional[str] = None) -> Settings:
    """
    Load engine settings.

    Args:
        config_file: Path to a settings YAML file (default: LEASECHECK_CONFIG,
            then the packaged leasecheck.yaml)

    Returns:
        Settings object

    Raises:
        ConfigurationError: If the file is missing or holds invalid values
    """
    path = Path(config_file or os.getenv('LEASECHECK_CONFIG') or DEFAULT_CONFIG_FILE)
    data = _load_yaml(path)

    labels = data.get('status_labels') or {}
    try:
        default_total_acres = float(data.get('default_total_acres', 160))
        # Fraction(str) keeps "1e-09" exact instead of going through binary float
        zero_epsilon = Fraction(str(data.get('zero_epsilon', '1e-9')))
        fuzzy_type_threshold = float(data.get('fuzzy_type_threshold', 90))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid numeric setting in '{path}': {e}")

    if default_total_acres <= 0:
        raise ConfigurationError("default_total_acres must be positive")

    return Settings(
        default_total_acres=default_total_acres,
        zero_epsilon=zero_epsilon,
        fuzzy_type_threshold=fuzzy_type_threshold,
        status_labels=StatusLabels(
            leased=labels.get('leased', StatusLabels.leased),
            leased_pugh_limited=labels.get('leased_pugh_limited', StatusLabels.leased_pugh_limited),
            open=labels.get('open', StatusLabels.open),
        ),
        instrument_type_aliases=_load_aliases(data.get('instrument_type_aliases')),
    )
