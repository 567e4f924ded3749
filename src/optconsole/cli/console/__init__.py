"""
Consola de pantalla completa: teclado, lienzo y caja de edición.
"""
