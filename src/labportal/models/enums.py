# enums.py
from enum import Enum


class Role(str, Enum):
    STUDENT = "student"
    TEACHER = "teacher"


class Batch(str, Enum):
    X = "X"
    Y = "Y"


class Language(str, Enum):
    C = "C"
    CPP = "C++"
    JAVA = "Java"
    PYTHON = "Python"


class TimeComplexity(str, Enum):
    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log n)"
    LINEAR = "O(n)"
    LINEARITHMIC = "O(n log n)"
    QUADRATIC = "O(n^2)"


class SpaceComplexity(str, Enum):
    CONSTANT = "O(1)"
    LINEAR = "O(n)"
