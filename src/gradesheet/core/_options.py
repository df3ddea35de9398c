"""Configuration of the grading run."""

import dataclasses
from typing import Tuple


@dataclasses.dataclass(frozen=True)
class GradesheetOptions:
    """Configures how a grade sheet is read, graded, and classified.

    Attributes
    ----------
    input_path : str
        Where the grade sheet is read from when no path is given explicitly.
        Default: ``"src/main/resources/calificaciones.csv"``.
    delimiter : str
        The cell separator used by the grade sheet. Default: ``";"``.
    weights : Tuple[float, float, float]
        Weights of the first partial exam, the second partial exam, and the
        lab coursework in the final grade. Default: ``(0.3, 0.3, 0.4)``.
    min_attendance : float
        Minimum attendance, as a percentage, needed to pass. Default: 75.0.
    min_score : float
        Minimum effective score needed on every assessment. Default: 4.0.
    min_final_grade : float
        Minimum final grade needed to pass. Default: 5.0.

    """

    input_path: str = "src/main/resources/calificaciones.csv"
    delimiter: str = ";"
    weights: Tuple[float, float, float] = (0.3, 0.3, 0.4)
    min_attendance: float = 75.0
    min_score: float = 4.0
    min_final_grade: float = 5.0

    def __post_init__(self):
        if len(self.weights) != 3:
            raise ValueError(
                f"Expected three weights (Parcial1, Parcial2, Practicas), got {self.weights!r}."
            )


DEFAULT_OPTIONS = GradesheetOptions()
