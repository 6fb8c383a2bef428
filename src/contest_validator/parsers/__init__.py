"""Decoders turning raw dataset files into typed records."""
