"""
Core: точная десятичная арифметика, разбор выражений и общие контракты.

Модули этого пакета не зависят от ввода-вывода и внешних систем;
консольная оболочка живёт отдельно в src.shell.
"""
