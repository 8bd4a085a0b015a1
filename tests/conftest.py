"""Pytest configuration and shared fixtures for randset tests."""

import tempfile
from pathlib import Path

import numpy as np
import pytest

from randset.builder.analyzer import MovesetAnalyzer
from randset.data.registry import StaticRegistry
from randset.data.schemas import CandidateInput


# ====================
# Configuration Fixtures
# ====================

@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


# ====================
# Reference Data Fixtures
# ====================

@pytest.fixture
def registry() -> StaticRegistry:
    """Small in-memory species and move registry."""
    return StaticRegistry.from_dict({
        "species": {
            "Garchomp": {
                "types": ["Dragon", "Ground"],
                "abilities": ["Rough Skin", "Sand Veil"],
                "base_stats": {"hp": 108, "atk": 130, "def": 95, "spa": 80, "spd": 85, "spe": 102},
            },
            "Pikachu": {
                "types": ["Electric"],
                "abilities": ["Static", "Lightning Rod"],
                "base_stats": {"hp": 35, "atk": 55, "def": 40, "spa": 50, "spd": 50, "spe": 90},
            },
            "Azumarill": {
                "types": ["Water", "Fairy"],
                "abilities": ["Huge Power", "Thick Fat"],
                "base_stats": {"hp": 100, "atk": 50, "def": 80, "spa": 60, "spd": 80, "spe": 50},
            },
            "Rotom-Wash": {
                "types": ["Electric", "Water"],
                "abilities": ["Levitate"],
            },
        },
        "moves": {
            "Hydro Steam": {"category": "Special", "type": "Water", "power": 80},
        },
    })


@pytest.fixture
def analyzer() -> MovesetAnalyzer:
    return MovesetAnalyzer()


# ====================
# Candidate Fixtures
# ====================

@pytest.fixture
def garchomp_candidate() -> CandidateInput:
    return CandidateInput(
        species="Garchomp",
        types=["Dragon", "Ground"],
        moves=["Earthquake", "Outrage", "Swords Dance", "Stealth Rock", "Fire Fang", "Iron Head"],
        abilities=["Rough Skin", "Sand Veil"],
    )


@pytest.fixture
def pikachu_candidate() -> CandidateInput:
    return CandidateInput(
        species="Pikachu",
        types=["Electric"],
        moves=["Thunderbolt", "Volt Switch", "Surf", "Knock Off", "Quick Attack"],
        abilities=["Static", "Lightning Rod"],
    )


@pytest.fixture
def azumarill_candidate() -> CandidateInput:
    return CandidateInput(
        species="Azumarill",
        types=["Water", "Fairy"],
        moves=["Belly Drum", "Substitute", "Aqua Jet", "Play Rough", "Knock Off", "Waterfall"],
        abilities=["Huge Power", "Thick Fat"],
    )
