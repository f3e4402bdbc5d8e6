"""
src/warehouse_core/kernel/warehouse.py
Almacén v1.3 (Bucket Router).
Tabla fija de Sectores direccionada por id % N.
Sin rehash: el espacio se mantiene constante desalojando a los menos populares.
"""
import logging
from typing import Tuple, Dict, Any, Optional

from ..limits import WAREHOUSE_CONFIG, validate_config
from ..ds.product import Product
from ..ds.sector import Sector
from ..hashing.routing import sector_index, probe_sequence

logger = logging.getLogger(__name__)

class Warehouse:
    """
    Orquestador de Sectores.
    Cada operación pública deja TODOS los sectores con el invariante de heap
    o no modifica nada.
    """
    __slots__ = ('_sectors', '_sector_count', '_capacity', '_probe_limit')

    def __init__(self,
                 sector_count: int = WAREHOUSE_CONFIG["sector_count"],
                 capacity: int = WAREHOUSE_CONFIG["capacity"],
                 probe_limit: int = WAREHOUSE_CONFIG["probe_limit"]):
        validate_config(sector_count, capacity, probe_limit)
        self._sector_count = sector_count
        self._capacity = capacity
        self._probe_limit = probe_limit
        self._sectors: Tuple[Sector, ...] = tuple(Sector(capacity) for _ in range(sector_count))

    def _home(self, product_id: int) -> Sector:
        return self._sectors[sector_index(product_id, self._sector_count)]

    def _locate(self, product_id: int) -> Tuple[Sector, int]:
        """(sector hogar, posición). Posición 0 si el id no está."""
        sector = self._home(product_id)
        return sector, sector.index_of(product_id)

    # =========================================================================
    # ALTA
    # =========================================================================
    def add_product(self, product_id: int, name: str, stock: int, day: int, demand: int):
        """
        Alta en el sector hogar. Si está lleno se desaloja antes la raíz
        (mínima demanda) y después se repara el sector completo.
        """
        sector = self._home(product_id)
        if sector.is_full:
            evicted = sector.evict_min()
            logger.debug("Sector %d lleno: desalojado %r para admitir %d",
                         sector_index(product_id, self._sector_count), evicted, product_id)
        sector.add(Product(product_id, name, stock, day, demand))
        sector.rebuild()

    def better_add_product(self, product_id: int, name: str, stock: int, day: int, demand: int):
        """
        Alta con sondeo lineal: antes de desalojar se busca hueco en los
        sectores siguientes (hogar+1, hogar+2, ...). Solo si no hay ninguno
        se recurre al alta con desalojo en el hogar.
        """
        if not self._home(product_id).is_full:
            self.add_product(product_id, name, stock, day, demand)
            return

        for idx in probe_sequence(product_id, self._sector_count, self._probe_limit):
            sector = self._sectors[idx]
            if not sector.is_full:
                sector.add(Product(product_id, name, stock, day, demand))
                sector.rebuild()
                logger.debug("Producto %d sondeado al sector %d", product_id, idx)
                return

        logger.debug("Sondeo agotado para %d: alta con desalojo", product_id)
        self.add_product(product_id, name, stock, day, demand)

    # =========================================================================
    # MUTACIÓN
    # =========================================================================
    def restock_product(self, product_id: int, amount: int):
        """Ajusta el stock (delta con signo). La demanda, y por tanto el orden, no cambia."""
        sector, pos = self._locate(product_id)
        if not pos:
            return
        product = sector.get(pos)
        logger.debug("Reponiendo producto %d con %d unidades", product_id, amount)
        product.update_stock(amount)
        sector.set(pos, product)

    def purchase_product(self, product_id: int, day: int, amount: int):
        """
        Compra: stock -= amount, demand += amount.
        Sin stock suficiente se rechaza sin tocar nada.
        """
        sector, pos = self._locate(product_id)
        if not pos:
            return
        product = sector.get(pos)
        if product.stock < amount:
            logger.info("Stock insuficiente para producto %d (%d < %d)",
                        product_id, product.stock, amount)
            return

        product.set_last_purchase_day(day)
        product.update_stock(-amount)
        product.update_demand(amount)
        # La clave de orden cambió: reparación completa del sector
        sector.rebuild()
        logger.debug("Compra de %d unidades del producto %d (día %d)", amount, product_id, day)

    def delete_product(self, product_id: int):
        """Borrado arbitrario en el sector hogar. Solo la primera coincidencia."""
        sector, pos = self._locate(product_id)
        if not pos:
            return
        sector.remove_at(pos)
        sector.rebuild()

    # =========================================================================
    # INTROSPECCIÓN
    # =========================================================================
    @property
    def sectors(self) -> Tuple[Sector, ...]:
        return self._sectors

    def get_sectors(self) -> Tuple[Sector, ...]:
        return self._sectors

    def find(self, product_id: int) -> Optional[Product]:
        """Busca en todos los sectores (un producto sondeado vive fuera de su hogar)."""
        for sector in self._sectors:
            pos = sector.index_of(product_id)
            if pos:
                return sector.get(pos)
        return None

    def check_invariants(self) -> bool:
        return all(s.size <= s.capacity and s.is_heap() for s in self._sectors)

    def stats(self) -> Dict[str, Any]:
        """Informe de ocupación por sector."""
        occupied = sum(s.size for s in self._sectors)
        total = self._sector_count * self._capacity
        return {
            "sectors": {i: s.stats() for i, s in enumerate(self._sectors)},
            "occupied": occupied,
            "capacity": total,
            "load_factor": occupied / total,
        }

    def __str__(self):
        lines = "".join(f"\t{sector!r}\n" for sector in self._sectors)
        return f"[\n{lines}]"
