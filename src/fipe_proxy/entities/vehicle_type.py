"""Vehicle type domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VehicleTypeEntity:
    """A FIPE vehicle category.

    The set is fixed by FIPE and never fetched upstream.
    """

    codigo: int
    nome: str


VEHICLE_TYPES: tuple[VehicleTypeEntity, ...] = (
    VehicleTypeEntity(codigo=1, nome="Carro"),
    VehicleTypeEntity(codigo=2, nome="Moto"),
    VehicleTypeEntity(codigo=3, nome="Caminhão"),
)
