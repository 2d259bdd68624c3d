# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""模拟的过程：光截获、能量平衡、光合作用与气孔导度。

各过程的模型位于同名的子包中，调度函数（例如 `energy_balance_inplace()`）位于
`plantbiophysics.processes.dispatch`，也可以直接从 `plantbiophysics` 导入。
"""
