"""Read-only business reports over the MavenMovies rental database."""

__version__ = "0.1.0"
