# src/tetris_stack/core/__init__.py
