"""
Core: точные числовые примитивы, ошибки, конфигурация и контракты.

Модуль не зависит от геометрии и выражений; оба слоя строятся поверх него.
"""
