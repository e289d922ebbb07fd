"""
Generators - Um gerador de traces e layout por tipo de grafico.
"""
