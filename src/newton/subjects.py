"""Subjects a problem can belong to."""

from enum import Enum


class Subject(str, Enum):
    """Subject of a problem; selects the instruction sent to the model."""

    PHYSICS = "physics"
    MATH = "math"

    @property
    def display_name(self) -> str:
        """Name used inside the instruction and in the UI."""
        return _DISPLAY_NAMES[self]

    @property
    def concept_example(self) -> str:
        """Example of the kind of law or theorem the model should cite."""
        return _CONCEPT_EXAMPLES[self]

    @property
    def example_problem(self) -> str:
        """A sample problem shown as a hint in the UI."""
        return _EXAMPLE_PROBLEMS[self]

    def toggled(self) -> "Subject":
        """Return the other subject."""
        return Subject.MATH if self is Subject.PHYSICS else Subject.PHYSICS


_DISPLAY_NAMES = {
    Subject.PHYSICS: "Physics",
    Subject.MATH: "Mathematics",
}

_CONCEPT_EXAMPLES = {
    Subject.PHYSICS: "Newton's Second Law",
    Subject.MATH: "Pythagorean Theorem",
}

_EXAMPLE_PROBLEMS = {
    Subject.PHYSICS: (
        "Calculate the trajectory of a projectile launched at 45 degrees "
        "with an initial velocity of 20m/s"
    ),
    Subject.MATH: "Find the derivative of f(x) = x^2 * sin(x)",
}
