"""ARFF text format parsing: line source, tokenizer, grammar, data lines."""
