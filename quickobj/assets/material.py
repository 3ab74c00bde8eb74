# -*- coding: utf-8 -*-
"""
Материал из MTL‑файла – только данные, без привязки к GPU.

Цвета хранятся как кортежи из трёх float, карты – как строки путей
в том виде, в каком их отдал разборщик MTL (см. `mtl_parser`).
"""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[float, float, float]


@dataclass
class Material:
    name: str = ""

    ambient: Color = (0.0, 0.0, 0.0)            # Ka
    diffuse: Color = (0.0, 0.0, 0.0)            # Kd
    specular: Color = (0.0, 0.0, 0.0)           # Ks
    specular_exponent: float = 0.0              # Ns
    optical_density: float = 0.0                # Ni
    dissolve: float = 0.0                       # d
    illumination: int = 0                       # illum

    map_ka: str = ""        # ambient
    map_kd: str = ""        # diffuse
    map_ks: str = ""        # specular
    map_ns: str = ""        # specular highlight
    map_d: str = ""         # alpha
    map_bump: str = ""

    @property
    def texture_maps(self) -> dict[str, str]:
        """Только заданные карты: {"map_kd": "wood.png", ...}."""
        maps = {
            "map_ka": self.map_ka,
            "map_kd": self.map_kd,
            "map_ks": self.map_ks,
            "map_ns": self.map_ns,
            "map_d": self.map_d,
            "map_bump": self.map_bump,
        }
        return {k: v for k, v in maps.items() if v}
