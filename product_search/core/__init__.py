"""Core package - 설정/로깅/예외/검증."""
