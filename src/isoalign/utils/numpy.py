"""Numpy array type aliases."""

from __future__ import annotations

from typing import Literal, TypeVar

from numpy import bool_, floating, integer
from numpy.typing import NDArray
from typing_extensions import Annotated

FloatDtype = TypeVar("FloatDtype", bound=floating)
IntDtype = TypeVar("IntDtype", bound=integer)

FloatArray = NDArray[FloatDtype]

FloatArray1D = Annotated[NDArray[FloatDtype], Literal["N"]]

IntArray1D = Annotated[NDArray[IntDtype], Literal["N"]]

BoolArray = NDArray[bool_]
