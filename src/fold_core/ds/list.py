"""
src/fold_core/ds/list.py
Estructura de Datos Persistente: Lista Enlazada (Cons List).
Versión 3.0: Recursión Estructural & Folds.

Dos variantes selladas:
    Nil            -> lista vacía (singleton de Empty).
    Cons(h, t)     -> nodo con un elemento y el resto de la lista.

Las operaciones son funciones libres (sum, fold_right, reverse...).
Se usan vía el módulo: `from fold_core.ds import list as L; L.sum(xs)`.

LÍMITE CONOCIDO: fold_right, sum, product, length y append recursan un
frame de Python por elemento. Ver max_safe_length().
"""
import sys
from typing import Any, Callable, Iterable, Iterator, TypeVar, Generic

T = TypeVar('T')
U = TypeVar('U')
B = TypeVar('B')

# Máximo de elementos mostrados por __repr__
REPR_LIMIT = 10

# Frames reservados para el llamador (pytest, REPL, driver)
RECURSION_HEADROOM = 200


class EmptyListError(IndexError):
    """Operación parcial (head, tail, set_head, init) invocada sobre Nil."""


class ConsList(Generic[T]):
    """
    Lista Inmutable Persistente.
    Base sellada: las únicas variantes son Empty y Cons.
    Todo el protocolo Python (iter, len, eq, repr) es ITERATIVO.
    """
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"ConsList es inmutable (intento de asignar '{name}')")

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    # --- PYTHON MAGIC METHODS ---

    def __iter__(self) -> Iterator[T]:
        """Iterador seguro O(N)."""
        curr = self
        while not curr.is_empty:
            yield curr.head
            curr = curr.tail

    def __len__(self) -> int:
        """O(N) Iterativo. Safe for 1M+ items."""
        count = 0
        curr = self
        while not curr.is_empty:
            count += 1
            curr = curr.tail
        return count

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self.is_empty: return "Nil"

        items = []
        count = 0

        curr = self
        while not curr.is_empty and count < REPR_LIMIT:
            items.append(repr(curr.head))
            curr = curr.tail
            count += 1

        if not curr.is_empty:
            items.append("...")

        return f"List[{', '.join(items)}]"

    def __eq__(self, other):
        """Igualdad estructural O(N). Corta en cuanto las colas son el mismo objeto."""
        if not isinstance(other, ConsList): return False
        a, b = self, other
        while not a.is_empty and not b.is_empty:
            if a is b: return True
            if a.head != b.head: return False
            a, b = a.tail, b.tail
        return a.is_empty and b.is_empty

    def __hash__(self):
        return hash(tuple(self))


class Empty(ConsList[Any]):
    """Lista vacía. Caso base de toda recursión."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def head(self):
        raise EmptyListError("Head of empty list")

    @property
    def tail(self):
        raise EmptyListError("Tail of empty list")

    def __reduce__(self):
        return (Empty, ())


Nil: ConsList[Any] = Empty()


class Cons(ConsList[T]):
    """Nodo no vacío. La cola se comparte, nunca se copia."""
    __slots__ = ('head', 'tail')
    __match_args__ = ('head', 'tail')

    def __init__(self, head: T, tail: ConsList[T]):
        # Validación: tail debe ser una lista
        if not isinstance(tail, ConsList):
            raise TypeError(f"Tail must be ConsList, got {type(tail)}")
        object.__setattr__(self, 'head', head)
        object.__setattr__(self, 'tail', tail)

    @property
    def is_empty(self) -> bool:
        return False

    def __reduce__(self):
        return (of, (tuple(self),))


# --- CONSTRUCTORES ---

def of(items: Iterable[T]) -> ConsList[T]:
    """O(N). Construye desde una secuencia Python preservando el orden."""
    acc = Nil
    # Iteración inversa para construir O(N) sin recursión
    for item in reversed(tuple(items)):
        acc = Cons(item, acc)
    return acc


def max_safe_length() -> int:
    """
    Longitud máxima aceptada por las operaciones con recursión directa
    (fold_right, sum, product, length, append) bajo el límite actual del
    intérprete. Por encima se propaga RecursionError.
    """
    return max(sys.getrecursionlimit() - RECURSION_HEADROOM, 0)


# --- AGREGADOS (Recursión Directa) ---

def sum(ints: ConsList[int]) -> int:
    if ints.is_empty:
        return 0
    return ints.head + sum(ints.tail)


def product(ds: ConsList[float]) -> float:
    """Corto-circuito: un 0.0 termina la recursión sin visitar el resto."""
    if ds.is_empty:
        return 1.0
    if ds.head == 0.0:
        return 0.0
    return ds.head * product(ds.tail)


def sum2(ns: ConsList[int]) -> int:
    return fold_right(ns, 0, lambda x, y: x + y)


def product2(ns: ConsList[float]) -> float:
    """Vía fold_right. Sin corto-circuito: visita todos los elementos."""
    return fold_right(ns, 1.0, lambda x, y: x * y)


def length(xs: ConsList[Any]) -> int:
    return fold_right(xs, 0, lambda _, acc: acc + 1)


# --- FOLDS ---

def fold_right(xs: ConsList[T], seed: B, combine: Callable[[T, B], B]) -> B:
    """
    combine(a1, combine(a2, ... combine(an, seed))).
    NO es stack-safe: un frame por elemento (ver max_safe_length).
    """
    if xs.is_empty:
        return seed
    return combine(xs.head, fold_right(xs.tail, seed, combine))


def fold_left(xs: ConsList[T], seed: B, combine: Callable[[B, T], B]) -> B:
    """
    combine(...combine(seed, a1)..., an).
    Implementación ITERATIVA: stack O(1) para cualquier longitud.
    """
    acc = seed
    curr = xs
    while not curr.is_empty:
        acc = combine(acc, curr.head)
        curr = curr.tail
    return acc


def fold_right_via_fold_left(xs: ConsList[T], seed: B, combine: Callable[[T, B], B]) -> B:
    """
    Mismo resultado que fold_right.
    fold_left compone de izquierda a derecha una cadena de funciones B -> B:
        g_k = b -> g_{k-1}(combine(a_k, b))
    y al final se aplica a seed. El recorrido es iterativo; la aplicación de
    la cadena anida un frame por elemento.
    """
    def step(g: Callable[[B], B], a: T) -> Callable[[B], B]:
        return lambda b: g(combine(a, b))

    chain = fold_left(xs, lambda b: b, step)
    return chain(seed)


# --- OPERACIONES ESTRUCTURALES ---

def head(xs: ConsList[T]) -> T:
    return xs.head


def tail(xs: ConsList[T]) -> ConsList[T]:
    """O(1). Devuelve la subestructura existente, sin copia."""
    return xs.tail


def set_head(xs: ConsList[T], new_head: T) -> ConsList[T]:
    if xs.is_empty:
        raise EmptyListError("set_head of empty list")
    return Cons(new_head, xs.tail)


def drop(xs: ConsList[T], n: int) -> ConsList[T]:
    """
    Elimina los n primeros. n <= 0 devuelve xs tal cual.
    Tolerante: n mayor que la longitud devuelve Nil.
    """
    curr = xs
    while n > 0 and not curr.is_empty:
        curr = curr.tail
        n -= 1
    return curr


def drop_while(xs: ConsList[T], predicate: Callable[[T], bool]) -> ConsList[T]:
    curr = xs
    while not curr.is_empty and predicate(curr.head):
        curr = curr.tail
    return curr


def init(xs: ConsList[T]) -> ConsList[T]:
    """Todos menos el último. O(N): acumula sobre la cola y revierte."""
    if xs.is_empty:
        raise EmptyListError("init of empty list")
    acc = Nil
    curr = xs
    while not curr.tail.is_empty:
        acc = Cons(curr.head, acc)
        curr = curr.tail
    return reverse(acc)


def append(a: ConsList[T], b: ConsList[T]) -> ConsList[T]:
    """O(len(a)). b queda compartida como cola del resultado."""
    return fold_right(a, b, Cons)


def reverse(xs: ConsList[T]) -> ConsList[T]:
    return fold_left(xs, Nil, lambda acc, h: Cons(h, acc))


# --- FUNCTIONAL API (High Order Functions) ---

def map(xs: ConsList[T], fn: Callable[[T], U]) -> ConsList[U]:
    """
    Aplica fn a cada elemento en orden y retorna una NUEVA lista.
    Stack-safe: fold_left + reverse.
    """
    return reverse(fold_left(xs, Nil, lambda acc, h: Cons(fn(h), acc)))


def filter(xs: ConsList[T], predicate: Callable[[T], bool]) -> ConsList[T]:
    """Retorna nueva lista solo con elementos que cumplan predicate."""
    return reverse(fold_left(xs, Nil, lambda acc, h: Cons(h, acc) if predicate(h) else acc))


# --- DISPLAY ---

def to_display_string(xs: ConsList[Any]) -> str:
    """Elementos separados por un espacio. Puro, no imprime."""
    return " ".join(str(x) for x in xs)
