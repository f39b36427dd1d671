"""Classic algorithms: graphs, flows, matching, geometry, number theory, FFT, linear algebra and string search."""

__version__ = "0.1.0"