"""Document generation."""

from .label_generator import ShipmentLabelGenerator

__all__ = ["ShipmentLabelGenerator"]
