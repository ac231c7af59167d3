"""Background photo provider."""

from idleview.photos.unsplash import CurrentPhoto, UnsplashAPI, UnsplashPhoto, build_photo_url

__all__ = ["CurrentPhoto", "UnsplashAPI", "UnsplashPhoto", "build_photo_url"]
