"""
Garden Round - a timed planting and harvesting simulation.
"""

from garden_round.config import Settings, get_settings
from garden_round.plants import PlantType, PowerUpKind, PLANT_TYPES, POWER_UP_TYPES
from garden_round.game import GardenGame, HarvestSummary
from garden_round.scoreboard import ScoreBoard, ScoreEntry
from garden_round.snapshot import GameSnapshot

__all__ = [
    "Settings",
    "get_settings",
    "PlantType",
    "PowerUpKind",
    "PLANT_TYPES",
    "POWER_UP_TYPES",
    "GardenGame",
    "HarvestSummary",
    "ScoreBoard",
    "ScoreEntry",
    "GameSnapshot",
]
