"""
Core: текстовая валидация, поразрядная арифметика, доменная модель
BigDecimalInt и JSON контракты.

Модули не зависят от внешних систем (сеть, файлы, БД).
"""
