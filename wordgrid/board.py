"""A rectangular letter grid, stored row-major, with optional wildcard cells."""

import functools

WILDCARD = "_"
WILDCARD_CELL = -1
LETTER_A = ord("a")


class ConfigError(ValueError):
    """Board dimensions or letters are unusable."""


@functools.cache
def init_neighbors(rows: int, cols: int) -> tuple[tuple[int, ...], ...]:
    def idx(r: int, c: int):
        return cols * r + c

    def pos(idx: int):
        return (idx // cols, idx % cols)

    ns: list[tuple[int, ...]] = []
    for i in range(0, rows * cols):
        r, c = pos(i)
        n = []
        for dr in range(-1, 2):
            nr = r + dr
            if nr < 0 or nr >= rows:
                continue
            for dc in range(-1, 2):
                nc = c + dc
                if nc < 0 or nc >= cols:
                    continue
                if dr == 0 and dc == 0:
                    continue
                n.append(idx(nr, nc))
        n.sort()
        ns.append(tuple(n))
    return tuple(ns)


class Board:
    rows: int
    cols: int
    cells: tuple[int, ...]

    def __init__(self, rows: int, cols: int, letters: str):
        if rows <= 0 or cols <= 0:
            raise ConfigError(f"Board dimensions must be positive, got {rows}x{cols}")
        if len(letters) != rows * cols:
            raise ConfigError(
                f"A {rows}x{cols} board needs {rows * cols} letters, got {len(letters)}: {letters!r}"
            )
        cells = []
        for let in letters.lower():
            if let == WILDCARD:
                cells.append(WILDCARD_CELL)
            elif "a" <= let <= "z":
                cells.append(ord(let) - LETTER_A)
            else:
                raise ConfigError(f"Invalid board letter {let!r} in {letters!r}")
        self.rows = rows
        self.cols = cols
        self.cells = tuple(cells)
        self._neighbors = init_neighbors(rows, cols)

    def __len__(self):
        return self.rows * self.cols

    def __str__(self):
        return "\n".join(
            " ".join(self.letter_at(r, c) for c in range(self.cols))
            for r in range(self.rows)
        )

    def __repr__(self):
        return f"Board({self.rows}, {self.cols}, {self.letters!r})"

    @property
    def letters(self) -> str:
        return "".join(
            WILDCARD if c == WILDCARD_CELL else chr(c + LETTER_A) for c in self.cells
        )

    def index(self, row: int, col: int) -> int:
        assert 0 <= row < self.rows and 0 <= col < self.cols
        return row * self.cols + col

    def position(self, idx: int) -> tuple[int, int]:
        return divmod(idx, self.cols)

    def letter_at(self, row: int, col: int) -> str:
        c = self.cells[self.index(row, col)]
        return WILDCARD if c == WILDCARD_CELL else chr(c + LETTER_A)

    def is_wildcard(self, row: int, col: int) -> bool:
        return self.cells[self.index(row, col)] == WILDCARD_CELL

    def neighbor_indices(self, idx: int) -> tuple[int, ...]:
        return self._neighbors[idx]

    def neighbors(self, row: int, col: int) -> list[tuple[int, int]]:
        return [self.position(n) for n in self._neighbors[self.index(row, col)]]
