"""
Ядро: модель диапазона, примитивы сравнения, ошибки и контракты.

Базовые строительные блоки rangekit; алгебра и представления
построены поверх них.
"""
