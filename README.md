# squaremat

A small library of square matrices that hold floating-point values. It has no
dependencies outside the standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Using it

```python
from squaremat.matrix import SquareMat

a = SquareMat(3)          # 3x3, every value 0
for i in range(3):
    for j in range(3):
        a[i][j] = 3 * i + j + 1

b = a.copy()              # independent copy
print(a + b)              # element-wise addition
print(a - b)              # element-wise subtraction
print(a * b)              # matrix product
print(a * 2, 2 * a)       # scaling by a number
print(a % b)              # element-wise product
print(a % 2)              # remainder of every value, quotient truncated toward zero
print(a / 4)              # division by a number
print(a ^ 3, a ** 3)      # power by repeated multiplication; a ^ 0 is the identity
print(-a)                 # every value negated
print(~a)                 # transpose
print(a.determinant())    # determinant by cofactor expansion along the first column
print(a.minor(0, 0))      # the matrix without row 0 and column 0
```

`a.size()` gives the number of rows. Rows are indexed with `a[i]` and values
with `a[i][j]`; an index outside the matrix raises `IndexError`. Iterating over
a matrix yields its rows, and iterating over a row yields its values.

A negative size, matrices of different sizes in `+`, `-`, `*` or `%`, or a
negative power raise `ValueError`. Dividing by zero, or taking a remainder by
zero, raises `ZeroDivisionError`. For `%` with a number, the number is first
truncated to an integer.

The in-place forms (`+=`, `-=`, `*=`, `/=`, `%=`) change the matrix itself.
`increment()` and `decrement()` add or subtract 1 from every value and return
the matrix; `post_increment()` and `post_decrement()` do the same but return a
copy taken before the change.

The determinant of a 0x0 matrix is 0.

### Comparison

Matrices compare by the sum of their values, not value by value: two matrices
are equal when their totals are equal, and `<`, `<=`, `>`, `>=` compare totals.
Matrices of different sizes can be compared this way. `total()` gives the sum.
Because equality works this way, matrices are not hashable.

### Printing

`str(matrix)` writes each row on its own line, each value followed by a tab.

### Lower-level pieces

- `squaremat.helpers.fmod(num, scalar)` — remainder with the quotient truncated
  toward zero; raises `ZeroDivisionError` for a zero divisor.
- `squaremat.helpers.power(num, scalar)` — `num` raised to a non-negative
  integer power by repeated multiplication.
- `squaremat.determinant.determinant(rows)` and
  `squaremat.determinant.minor(rows, i, j)` — the same operations on plain
  lists of rows.
- `squaremat.ordering.SumOrdering` — the mixin that supplies the sum-based
  comparisons.

## Demo

A walk through every operation on five 3x3 sample matrices, printed to
standard output:

    squaremat-demo

The same is available from Python as `squaremat.demo.run_demo(stream)`, and
`squaremat.demo.build_base_matrices()` returns the five sample matrices.

## What it does not do

There is no solving of linear systems, no inverse, and no reading or writing
of matrices from files; the demo command takes no input and only prints its
fixed walk-through.