from enum import Enum


class OperationScope(Enum):
    GLOBAL = "global"
    REGIONAL = "region"
    ZONAL = "zone"
