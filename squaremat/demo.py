"""Command that builds a few sample matrices and prints every operation on them."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .helpers import power
from .matrix import SquareMat

_SIZE = 3


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, SquareMat):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def build_base_matrices() -> tuple[SquareMat, SquareMat, SquareMat, SquareMat, SquareMat]:
    """Return the five 3x3 sample matrices used by the demo.

    In order: 9 down to 1; 1 up to 9; all ones; ``(-1)**i * num**2``;
    and the identity.
    """
    descending, ascending, ones, alternating, identity = (
        SquareMat(_SIZE) for _ in range(5)
    )
    for i in range(_SIZE):
        for j in range(_SIZE):
            num = _SIZE * i + j + 1
            descending[i][j] = 10 - num
            ascending[i][j] = num
            ones[i][j] = 1
            alternating[i][j] = power(-1, i) * power(num, 2)
            identity[i][j] = 1 if i == j else 0
    return descending, ascending, ones, alternating, identity


def run_demo(out: TextIO) -> None:
    """Write the demonstration of every matrix operation to ``out``."""

    def show(label: str, value: object) -> None:
        out.write(f"{label}\n{_format(value)}\n")

    out.write("Setting Values to Multiple Matrices...\n")
    mat1, mat2, mat3, mat4, mat5 = build_base_matrices()

    out.write("The 5 Base Matrices:\n")
    for name, mat in (
        ("mat1", mat1),
        ("mat2", mat2),
        ("mat3", mat3),
        ("mat4", mat4),
        ("mat5", mat5),
    ):
        show(f"{name}:", mat)

    show("mat2+mat3=", mat2 + mat3)
    show("mat2-mat4=", mat2 - mat4)
    show("-mat4", -mat4)
    show("mat1*mat5=", mat1 * mat5)
    show("mat3*5=", mat3 * 5)
    show("2*mat2=", 2 * mat2)
    show("mat1%mat4=", mat1 % mat4)
    show("mat1%2=", mat1 % 2)
    show("mat5/7=", mat5 / 7)
    show("mat2^3=", mat2 ^ 3)
    show("++mat4=", mat4.increment())
    show("--mat4=", mat4.decrement())
    show("mat2++=", mat2.post_increment())
    show("mat2=", mat2)
    show("mat2--=", mat2.post_decrement())
    show("mat2=", mat2)
    show("~mat1=", ~mat1)
    show("mat3[1][0]=", mat3[1][0])
    show("mat1==mat2=", mat1 == mat2)
    show("mat1!=mat5=", mat1 != mat5)
    show("mat2>=mat5=", mat2 >= mat5)
    show("mat1<=mat2=", mat1 <= mat2)
    show("mat4>mat5=", mat4 > mat5)
    show("mat3<mat1=", mat3 < mat1)
    show("!mat3=", mat3.determinant())

    mat1 += mat3
    show("mat1+=mat3=", mat1)
    mat1 -= mat3
    show("mat1-=mat3=", mat1)
    mat4 *= mat4
    show("mat4*=mat4=", mat4)
    mat2 *= 7
    show("mat2*=7=", mat2)
    mat2 /= 7
    show("mat2/=7=", mat2)
    mat1 %= mat2
    show("mat1%=mat2=", mat1)
    mat2 %= 3
    show("mat2%=3=", mat2)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration on standard output."""
    parser = argparse.ArgumentParser(
        prog="squaremat-demo",
        description="Print a walk-through of square matrix operations.",
    )
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())