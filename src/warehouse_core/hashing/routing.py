"""
src/warehouse_core/hashing/routing.py
Política de Direccionamiento.
Proyección id -> sector y secuencia de sondeo lineal.
"""
from typing import Iterator
from ..limits import SECTOR_COUNT, PROBE_LIMIT

def sector_index(product_id: int, sector_count: int = SECTOR_COUNT) -> int:
    """
    Sector 'hogar' de un producto: id mod N.
    Determinista. Ids negativos también caen en [0, N).
    """
    return product_id % sector_count

def probe_sequence(product_id: int,
                   sector_count: int = SECTOR_COUNT,
                   limit: int = PROBE_LIMIT) -> Iterator[int]:
    """
    Sondeo lineal: hogar+1, hogar+2, ... (módulo N).
    Se detiene ANTES de volver al hogar o al alcanzar 'limit' pasos.
    El sector hogar nunca se emite.
    """
    home = sector_index(product_id, sector_count)
    step = 1
    while step <= limit:
        candidate = (home + step) % sector_count
        if candidate == home:
            return
        yield candidate
        step += 1
