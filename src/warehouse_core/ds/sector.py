"""
src/warehouse_core/ds/sector.py
Sector v1.2: Min-Heap Acotado (Bounded Heap).
Array fijo 1-indexado de 'capacity' huecos, ordenado por demanda.
Nunca crece: si está lleno, el llamador desaloja la raíz antes de insertar.
"""
from typing import List, Optional, Iterator, Dict, Any
from ..limits import SECTOR_CAPACITY, ROOT
from .product import Product

class Sector:
    """
    Heap mínimo sobre Product.demand.
    Invariant: para todo 2 <= i <= size, demand(i) >= demand(i // 2).
    Los huecos (size, capacity] son None y no participan del orden.
    """
    __slots__ = ('_slots', '_size', '_capacity')

    def __init__(self, capacity: int = SECTOR_CAPACITY):
        if capacity < 1:
            raise ValueError(f"CRITICAL: Capacidad de sector inválida ({capacity}).")
        self._capacity = capacity
        # Índice 0 sin uso: la aritmética padre/hijo es 1-indexada
        self._slots: List[Optional[Product]] = [None] * (capacity + 1)
        self._size = 0

    # --- Estado ---

    @property
    def size(self) -> int:
        return self._size

    def get_size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._size >= self._capacity

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    # --- Acceso Posicional ---

    def get(self, pos: int) -> Optional[Product]:
        """Lectura tolerante: posiciones vacías o fuera de rango devuelven None."""
        if 1 <= pos <= self._size:
            return self._slots[pos]
        return None

    def set(self, pos: int, product: Product):
        """Escritura sobre una posición ocupada."""
        if not isinstance(product, Product):
            raise TypeError(f"Sector solo almacena Product, recibido {type(product)}")
        if not 1 <= pos <= self._size:
            raise IndexError(f"CRITICAL: Posición {pos} fuera de [1, {self._size}].")
        self._slots[pos] = product

    def add(self, product: Product):
        """
        Añade al final (posición size + 1). NO restaura el orden: llamar a swim().
        """
        if not isinstance(product, Product):
            raise TypeError(f"Sector solo almacena Product, recibido {type(product)}")
        if self.is_full:
            raise IndexError(f"CRITICAL: Sector lleno ({self._capacity}/{self._capacity}). Desalojar antes de añadir.")
        self._size += 1
        self._slots[self._size] = product

    def delete_last(self) -> Optional[Product]:
        """Vacía la última posición ocupada. Retorna el producto retirado."""
        if self._size == 0:
            return None
        product = self._slots[self._size]
        self._slots[self._size] = None
        self._size -= 1
        return product

    def swap(self, i: int, j: int):
        if not (1 <= i <= self._size and 1 <= j <= self._size):
            raise IndexError(f"CRITICAL: swap({i}, {j}) fuera de [1, {self._size}].")
        self._slots[i], self._slots[j] = self._slots[j], self._slots[i]

    # --- Primitivas de Heap ---

    def _demand(self, pos: int) -> int:
        return self._slots[pos].demand

    def swim(self, pos: int):
        """Sube la posición mientras su demanda sea menor que la del padre."""
        while pos > ROOT and pos <= self._size:
            parent = pos // 2
            if self._demand(pos) >= self._demand(parent):
                break
            self.swap(pos, parent)
            pos = parent

    def sink(self, pos: int):
        """
        Hunde la posición mientras el hijo menor tenga demanda estrictamente menor.
        Empate entre hijos: gana el izquierdo.
        """
        while 1 <= pos and 2 * pos <= self._size:
            child = 2 * pos
            if child + 1 <= self._size and self._demand(child + 1) < self._demand(child):
                child += 1
            if self._demand(child) >= self._demand(pos):
                break
            self.swap(pos, child)
            pos = child

    def rebuild(self):
        """
        Reparación posicional completa: swim de 2 a size.
        Cada paso deja [1, i] como heap, así que el resultado es válido
        partiendo de cualquier disposición.
        """
        for pos in range(ROOT + 1, self._size + 1):
            self.swim(pos)

    # --- Operaciones Compuestas ---

    def index_of(self, product_id: int) -> int:
        """Búsqueda lineal por id (el heap no indexa por id). 0 si no está."""
        for pos in range(ROOT, self._size + 1):
            if self._slots[pos].id == product_id:
                return pos
        return 0

    def evict_min(self) -> Optional[Product]:
        """
        Desalojo del menos popular: raíz <-> último, delete_last, sink(1).
        O(log capacity).
        """
        if self._size == 0:
            return None
        self.swap(ROOT, self._size)
        evicted = self.delete_last()
        self.sink(ROOT)
        return evicted

    def remove_at(self, pos: int) -> Product:
        """
        Borrado arbitrario: pos <-> último, delete_last y reparación local.
        El valor desplazado puede tener que subir o bajar: se intentan ambos.
        """
        if not 1 <= pos <= self._size:
            raise IndexError(f"CRITICAL: Posición {pos} fuera de [1, {self._size}].")
        self.swap(pos, self._size)
        removed = self.delete_last()
        if pos <= self._size:
            self.sink(pos)
            self.swim(pos)
        return removed

    def is_heap(self) -> bool:
        for pos in range(ROOT + 1, self._size + 1):
            if self._demand(pos) < self._demand(pos // 2):
                return False
        return True

    # --- Introspección ---

    def stats(self) -> Dict[str, Any]:
        return {
            "size": self._size,
            "capacity": self._capacity,
            "free": self._capacity - self._size,
            "min_demand": self._demand(ROOT) if self._size else None,
        }

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Product]:
        """Orden de array (no ordenado por demanda)."""
        for pos in range(ROOT, self._size + 1):
            yield self._slots[pos]

    def __repr__(self):
        return f"[{', '.join(repr(p) for p in self)}]"
