"""Fixed value sets validated at the API boundary"""

from enum import Enum


class HeatingType(str, Enum):
    GAS = "GAS"
    OIL = "OIL"
    DISTRICT_HEATING = "DISTRICT_HEATING"
    HEAT_PUMP_AIR = "HEAT_PUMP_AIR"
    HEAT_PUMP_GROUND = "HEAT_PUMP_GROUND"
    HEAT_PUMP_WATER = "HEAT_PUMP_WATER"
    PELLET_BIOMASS = "PELLET_BIOMASS"
    NIGHT_STORAGE = "NIGHT_STORAGE"
    ELECTRIC_DIRECT = "ELECTRIC_DIRECT"
    HYBRID = "HYBRID"
    CHP = "CHP"


class AdditionalEnergySource(str, Enum):
    PHOTOVOLTAIC = "PHOTOVOLTAIC"
    SOLAR_THERMAL = "SOLAR_THERMAL"
    SMALL_WIND = "SMALL_WIND"


class EnergyStorageSystem(str, Enum):
    BATTERY_STORAGE = "BATTERY_STORAGE"
    HEAT_STORAGE = "HEAT_STORAGE"


# Months between scheduled maintenances
MAINTENANCE_INTERVALS = (1, 3, 6, 12, 24)
