"""Command line interface for sample_predictor."""
