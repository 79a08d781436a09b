"""Validation stages: well-formedness, structure, and the per-file checker."""

from wowui_xml_lint.validators.checker import XmlFileChecker
from wowui_xml_lint.validators.structure import StructureResult, parse_structure
from wowui_xml_lint.validators.well_formedness import check_well_formed

__all__ = ["StructureResult", "XmlFileChecker", "check_well_formed", "parse_structure"]
