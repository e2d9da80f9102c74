"""
Hashing utilities for translation artifacts.
Lets a report be checked against the source and Cairo code it describes.
"""

import hashlib


class ArtifactHasher:
    """
    Computes SHA-256 hashes for translation artifacts.
    """

    @staticmethod
    def hash_string(content: str) -> str:
        return hashlib.sha256(content.encode('utf-8')).hexdigest()

    @staticmethod
    def compute_combined_hash(source_hash: str, cairo_hash: str) -> str:
        combined = f"{source_hash}|{cairo_hash}"
        return hashlib.sha256(combined.encode('utf-8')).hexdigest()

    @staticmethod
    def verify_integrity(report: dict, python_source: str, cairo_source: str) -> dict:
        """
        Check a JSON report against the actual source and output.

        Args:
            report: Dict produced by TranslationJSONFormatter.generate()
            python_source: Python source the report claims to describe
            cairo_source: Cairo code the report claims to describe

        Returns:
            {'valid': bool, 'source_match': bool, 'cairo_match': bool,
             'combined_match': bool}
        """
        artifacts = report.get('artifacts', {})

        source_match = ArtifactHasher.hash_string(python_source) == artifacts.get('source_hash')
        cairo_match = ArtifactHasher.hash_string(cairo_source) == artifacts.get('cairo_hash')

        combined_hash = ArtifactHasher.compute_combined_hash(
            artifacts.get('source_hash', ''),
            artifacts.get('cairo_hash', '')
        )
        combined_match = combined_hash == artifacts.get('combined_hash')

        return {
            'valid': source_match and cairo_match and combined_match,
            'source_match': source_match,
            'cairo_match': cairo_match,
            'combined_match': combined_match
        }
