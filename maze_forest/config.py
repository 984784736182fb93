import numpy as np
from muutils.json_serialize import (
    SerializableDataclass,
    serializable_dataclass,
    serializable_field,
)


@serializable_dataclass(frozen=True, kw_only=True, properties_to_serialize=["n_nodes"])
class GridConfig(SerializableDataclass):
    """shape of a grid, plus the seed for the one random source a generation run should use

    # Parameters
    - `n_rows: int`: number of rows, at least 1
    - `n_cols: int`: number of columns, at least 1
    - `seed: int | None`: seed for `get_rng`. `None` draws fresh entropy
    """

    n_rows: int
    n_cols: int
    seed: int | None = serializable_field(
        default=None,
        loading_fn=lambda data: data.get("seed", None),
    )

    def __post_init__(self) -> None:
        if self.n_rows < 1:
            raise ValueError(f"n_rows must be >= 1, got {self.n_rows = }")
        if self.n_cols < 1:
            raise ValueError(f"n_cols must be >= 1, got {self.n_cols = }")

    @property
    def n_nodes(self) -> int:
        return self.n_rows * self.n_cols

    @property
    def grid_shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_cols)

    def get_rng(self) -> np.random.Generator:
        """a fresh generator seeded from this config; thread the same one through a whole run"""
        return np.random.default_rng(self.seed)

    def summary(self) -> dict:
        """return a human-readable summary of the config"""
        return dict(
            n_rows=self.n_rows,
            n_cols=self.n_cols,
            n_nodes=self.n_nodes,
            seed=self.seed,
        )
