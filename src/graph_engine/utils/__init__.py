"""
Utils - Engines reutilizaveis por todos os generators.

    - axis_configurator: Eixos lineares e logaritmicos
    - color_manager: Tokens, paletas e escalas de cor
    - size_manager: Escalas de tamanho de marcadores
    - band_builder: Faixas de referencia
    - stack_calculator: Empilhamento de series
    - distribution_calculator: Estatisticas de box, violino e curva
    - legend_manager: Legenda combinada
    - plot_styler: Layout comum
    - file_saver: Entrega ao renderizador e gravacao em disco
"""
