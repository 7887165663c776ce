"""
Configuration classes for mwfix.
"""

from dataclasses import dataclass


@dataclass
class ResolverConfig:
    """Configuration for a placeholder resolution run."""
    retain_ner: bool = False  # Keep grup.nom.{lug,org,pers,otros} instead of plain grup.nom
    normalize: bool = True  # Run the whole-tree normalizer on the output
    output_suffix: str = ".fixed"  # Appended to the input file name
    debug: bool = False  # Enable debug output
