"""
Models - Estruturas de dados e de configuracao dos graficos.

    - primitives: Enumeracoes e unioes marcadas sem dependencias
    - configurations: Sub-configuracoes compartilhadas (eixos, cores, tamanhos, faixas)
    - graph_data: Dados de cada tipo de grafico
    - graph_configurations: Configuracoes de cada tipo de grafico
"""
