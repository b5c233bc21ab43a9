"""
Core: представление числа, нормализация, выравнивание и арифметика.

Не зависит ни от чего, кроме встроенного int (неограниченное целое).
"""
