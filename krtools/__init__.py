"""Text filters, C-source scanners, file tools, a calculator, buffered I/O and a simulated allocator."""

__version__ = "0.1.0"