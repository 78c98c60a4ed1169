"""SLO spec loading."""

from slirules.specs.loader import load_slo_spec, parse_slo_spec

__all__ = ["load_slo_spec", "parse_slo_spec"]
