from whitted.camera.camera import Camera

__all__ = ["Camera"]
