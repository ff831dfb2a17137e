"""
src/fold_core/runner.py
Driver de demostración: recorre la API de ConsList e imprime resultados.
Uso: python -m fold_core.runner   (o el script 'fold-demo').
"""
import sys
from sympy import Function, Symbol

from fold_core.ds import list as L
from fold_core.ds.list import Cons, Nil


def show_folds_symbolic():
    """
    Folds sobre una función no interpretada f y semilla z.
    Expone la asociatividad: derecha f(1, f(2, f(3, z))), izquierda f(f(f(z, 1), 2), 3).
    """
    f = Function('f')
    z = Symbol('z')
    xs = L.of([1, 2, 3])

    right = L.fold_right(xs, z, f)
    right2 = L.fold_right_via_fold_left(xs, z, f)
    left = L.fold_left(xs, z, f)
    return right, right2, left


def main() -> int:
    xs = L.of([1, 2, 3, 4, 5])

    print("[*] DEMOSTRACIÓN: LISTA PERSISTENTE Y FOLDS")
    print("-" * 65)
    print(f"Lista: {L.to_display_string(xs)}")

    # fold_right con Cons reconstruye la lista
    print(f"fold_right(Cons): {L.to_display_string(L.fold_right(L.of([1, 2, 3]), Nil, Cons))}")

    print(f"Length: {L.length(xs)}")
    print(f"Sum: {L.fold_left(xs, 0, lambda a, b: a + b)}")
    print(f"Product: {L.fold_left(xs, 1, lambda a, b: a * b)}")
    print(f"Length (fold_left): {L.fold_left(xs, 0, lambda acc, _: acc + 1)}")

    print(f"Reverse: {L.to_display_string(L.reverse(xs))}")

    print(f"Fold right: {L.to_display_string(L.fold_right(L.of([1, 2, 3]), Nil, Cons))}")
    print(f"Fold right using fold left: "
          f"{L.to_display_string(L.fold_right_via_fold_left(L.of([1, 2, 3]), Nil, Cons))}")

    right, right2, left = show_folds_symbolic()
    print("-" * 65)
    print(f"Simbólico fold_right: {right}")
    print(f"Simbólico fold_right_via_fold_left: {right2}")
    print(f"Simbólico fold_left: {left}", flush=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
