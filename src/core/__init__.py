"""Engine, scene base class, renderer and 2D math helpers."""
