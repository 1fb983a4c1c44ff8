"""The fixed cave graph.

CAVE_LAYOUT is shared read-only by every game; each game works on its own
list of Chamber objects built by new_chambers().
"""

from dataclasses import dataclass, field
from enum import Enum


class Hazard(str, Enum):
    NONE = "None"
    WUMPUS = "Wumpus"
    PIT = "Pit"
    BATS = "Bats"


@dataclass(frozen=True)
class ChamberTemplate:
    """One row of the compiled-in layout."""

    id: int
    x: int
    y: int
    connections: tuple[int, ...]
    description: str | None = None


@dataclass
class Chamber:
    """A chamber in a running game. Only hazard changes during play."""

    id: int
    x: int
    y: int
    connections: tuple[int, ...] = field(default_factory=tuple)
    hazard: Hazard = Hazard.NONE
    description: str | None = None

    @classmethod
    def from_template(cls, template: ChamberTemplate) -> "Chamber":
        return cls(
            id=template.id,
            x=template.x,
            y=template.y,
            connections=template.connections,
            description=template.description,
        )


# 16 chambers, irregular connections, positioned for a 2D map
CAVE_LAYOUT: tuple[ChamberTemplate, ...] = (
    ChamberTemplate(
        0, 100, 120, (1, 4, 5),
        "A wide cavern with a high ceiling. Water drips from stalactites above.",
    ),
    ChamberTemplate(
        1, 200, 80, (0, 2, 6),
        "A narrow passage with glowing moss on the walls. The air feels damp.",
    ),
    ChamberTemplate(
        2, 320, 100, (1, 3, 7),
        "A small chamber with strange crystal formations jutting from the floor.",
    ),
    ChamberTemplate(
        3, 420, 160, (2, 8, 4),
        "A large cavern with a small underground stream running through it.",
    ),
    ChamberTemplate(
        4, 380, 260, (0, 3, 9),
        "A winding tunnel with ancient carvings on the walls. "
        "They seem to tell a story.",
    ),
    ChamberTemplate(
        5, 120, 220, (0, 6, 10),
        "A chamber with a low ceiling. You have to stoop to move around.",
    ),
    ChamberTemplate(
        6, 200, 200, (1, 5, 7, 11),
        "A crossroads of several tunnels. "
        "Echoes bounce off the walls from all directions.",
    ),
    ChamberTemplate(
        7, 300, 180, (2, 6, 8, 12),
        "A room with a small underground pool. The water is crystal clear.",
    ),
    ChamberTemplate(
        8, 400, 220, (3, 7, 9, 13),
        "A chamber filled with strange mushrooms that give off a faint blue glow.",
    ),
    ChamberTemplate(
        9, 340, 320, (4, 8, 14),
        "A vast chamber with towering rock formations like frozen waterfalls.",
    ),
    ChamberTemplate(
        10, 80, 320, (5, 11, 15),
        "A small alcove with smooth walls. It feels strangely peaceful here.",
    ),
    ChamberTemplate(
        11, 180, 300, (6, 10, 12),
        "A chamber with a floor covered in small, colorful pebbles "
        "that crunch underfoot.",
    ),
    ChamberTemplate(
        12, 260, 260, (7, 11, 13),
        "A room where the ceiling opens to a natural chimney. "
        "A shaft of light filters down.",
    ),
    ChamberTemplate(
        13, 340, 240, (8, 12, 14),
        "A chamber with walls that sparkle with embedded minerals. "
        "It's quite beautiful.",
    ),
    ChamberTemplate(
        14, 300, 360, (9, 13, 15),
        "A large open space with strange rock formations "
        "that almost look like furniture.",
    ),
    ChamberTemplate(
        15, 180, 380, (10, 14),
        "A deep chamber with the sound of distant water. "
        "Stalactites hang like daggers above.",
    ),
)


def new_chambers() -> list[Chamber]:
    """Build a fresh, hazard-free chamber list for one game."""
    return [Chamber.from_template(template) for template in CAVE_LAYOUT]
