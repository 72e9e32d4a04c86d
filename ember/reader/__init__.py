"""Reader: tokenizer and recursive-descent parser."""
