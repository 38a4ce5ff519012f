"""Schema validation for generation profiles."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import validate, ValidationError

from .config import GenerationProfile

DEFAULT_SCHEMA_PATH = Path(__file__).parent / 'profile-schema.json'


class ProfileValidator:
    """Validates generation profiles against the schema"""

    def __init__(self, schema_path: Optional[Path] = None):
        with open(schema_path or DEFAULT_SCHEMA_PATH, 'r') as f:
            self.schema = json.load(f)

    def validate_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate already-parsed profile data and return it"""
        try:
            validate(instance=data, schema=self.schema)
        except ValidationError as e:
            raise ValueError(f"Invalid profile: {e.message}")
        return data

    def validate(self, profile_path: Path) -> Dict[str, Any]:
        """Validate a profile file and return parsed data"""
        with open(profile_path, 'r') as f:
            data = json.load(f)
        return self.validate_data(data)

    def load(self, profile_path: Path) -> GenerationProfile:
        """Validate a profile file and build the profile from it"""
        return GenerationProfile.from_dict(self.validate(profile_path))
