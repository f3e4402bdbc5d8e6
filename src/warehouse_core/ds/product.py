"""
src/warehouse_core/ds/product.py
Registro de Producto.
Entidad mutable: identidad fija + contadores (stock, demanda).
La demanda es la CLAVE DE ORDEN del heap de cada Sector.
"""
from typing import Optional, Dict, Any

class Product:
    """
    Producto almacenado en un Sector.
    Solo 'stock', 'demand' y 'last_purchase_day' cambian tras la creación.
    """
    __slots__ = ('id', '_name', 'stock', '_day', 'demand', 'last_purchase_day')

    def __init__(self, product_id: int, name: str, stock: int, day: int, demand: int):
        self.id = product_id
        self._name = name
        self.stock = stock
        self._day = day
        self.demand = demand
        self.last_purchase_day: Optional[int] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def day(self) -> int:
        """Día de alta en el almacén."""
        return self._day

    def update_stock(self, delta: int):
        """Delta con signo. La validación de negocio la hace el Warehouse."""
        self.stock += delta

    def update_demand(self, delta: int):
        self.demand += delta

    def set_last_purchase_day(self, day: int):
        self.last_purchase_day = day

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self._name,
            "stock": self.stock,
            "day": self._day,
            "demand": self.demand,
            "last_purchase_day": self.last_purchase_day,
        }

    def __repr__(self):
        return (f"({self.id}, {self._name}, stock={self.stock}, "
                f"day={self._day}, demand={self.demand}, last={self.last_purchase_day})")
