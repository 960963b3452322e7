"""CRUSH - an offline bitcrusher for audio files."""
