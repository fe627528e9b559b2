"""
StockCare - suficiencia de stock de medicamentos
"""
