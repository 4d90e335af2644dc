from dataclasses import dataclass


@dataclass(frozen=True)
class Phasing:
    """Marker: the entity walks through ``Blocking`` tiles.

    The default traversal function checks this store before looking for
    walls, so a phasing ghost plans straight paths across the maze.
    """

    pass
