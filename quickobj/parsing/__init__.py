"""
Пакет parsing – токенизатор строк, сборщик OBJ и разборщик MTL.
"""

from quickobj.parsing.tokenizer import Line, iter_lines, split_fields
from quickobj.parsing.mtl_parser import MtlParser, parse_mtl, load_mtl
from quickobj.parsing.obj_builder import ObjBuilder, parse_obj

__all__ = [
    "Line",
    "iter_lines",
    "split_fields",
    "MtlParser",
    "parse_mtl",
    "load_mtl",
    "ObjBuilder",
    "parse_obj",
]
