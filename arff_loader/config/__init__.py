"""YAML configuration for the arff-loader CLI."""
