"""
src/warehouse_core/limits.py
Topología Fija del Almacén v1.0.
Define las dimensiones físicas: cuántos Sectores hay y cuántos huecos tiene cada uno.
"""

# =============================================================================
# GEOMETRÍA DEL ALMACÉN
# =============================================================================
# Tabla de sectores: índice = id % SECTOR_COUNT
# Cada sector: Heap 1-indexado [_, 1, 2, ..., SECTOR_CAPACITY]
#   hijo(i)  = 2i, 2i + 1
#   padre(i) = i // 2
# =============================================================================

SECTOR_COUNT    = 10   # Buckets. No crece nunca (sin rehash).
SECTOR_CAPACITY = 5    # Huecos por sector.
ROOT            = 1    # Posición de la raíz (mínima demanda).

# Tope de iteraciones del sondeo lineal (better_add_product).
# Garantiza terminación aunque todos los sectores estén llenos.
PROBE_LIMIT     = 100

# =============================================================================
# CONFIGURACIÓN POR DEFECTO
# =============================================================================
WAREHOUSE_CONFIG = {
    "sector_count": SECTOR_COUNT,
    "capacity":     SECTOR_CAPACITY,
    "probe_limit":  PROBE_LIMIT,
}

def validate_config(sector_count: int, capacity: int, probe_limit: int) -> None:
    """Rechaza geometrías degeneradas antes de reservar memoria."""
    for key, value in (("sector_count", sector_count),
                       ("capacity", capacity),
                       ("probe_limit", probe_limit)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"CRITICAL: '{key}' debe ser entero, recibido {type(value).__name__}.")
        if value < 1:
            raise ValueError(f"CRITICAL: '{key}' debe ser positivo, recibido {value}.")
