"""Schema validation for fuzzing profiles."""

import json
from pathlib import Path
from typing import Dict, Any

from jsonschema import validate, ValidationError


PACKAGE_DIR = Path(__file__).parent
SCHEMA_PATH = PACKAGE_DIR / 'profile-schema.json'
DEFAULT_PROFILE_PATH = PACKAGE_DIR / 'default-profile.json'


class ProfileValidator:
    """Validates fuzzing profiles against the schema"""
    
    def __init__(self, schema_path: Path = SCHEMA_PATH):
        with open(schema_path, 'r', encoding='utf-8') as f:
            self.schema = json.load(f)
    
    def validate(self, profile_path: Path) -> Dict[str, Any]:
        """Validate a profile file and return parsed data"""
        with open(profile_path, 'r', encoding='utf-8') as f:
            try:
                profile = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid profile: {profile_path}: {e}")
        
        return self.validate_data(profile)
    
    def validate_data(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        """Validate an already-parsed profile"""
        try:
            validate(instance=profile, schema=self.schema)
        except ValidationError as e:
            raise ValueError(f"Invalid profile: {e.message}")
        
        generation = profile.get('generation', {})
        min_args = generation.get('min_args', 1)
        max_args = generation.get('max_args', 8)
        if min_args > max_args:
            raise ValueError(
                f"Invalid profile: min_args ({min_args}) exceeds max_args ({max_args})"
            )
        
        return profile
