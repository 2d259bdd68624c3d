# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""本模块定义和描述 plantbiophysics 中使用的信号

plantbiophysics 使用信号通知使用者模拟过程中发生的事件，例如能量平衡的迭代达到最大次数仍未收敛。
模型通过 `DispatcherObject._send_signal()` 发送信号，发送者（sender）是正在被模拟的对象
（ModelList）。任何代码都可以使用 PyDispatcher_ 的 `dispatcher.connect()` 注册处理器，
既可以只监听某一个对象，也可以使用 `dispatcher.Any` 监听所有对象::

    from pydispatch import dispatcher
    import plantbiophysics as pb

    not_converged = []

    def on_max_iter(sender, status, iterations):
        not_converged.append((sender, iterations))

    dispatcher.connect(on_max_iter, pb.signals.energy_balance_max_iter, sender=dispatcher.Any)

强烈建议使用关键字参数发送信号，以避免位置参数和关键字参数之间的冲突。

目前使用如下信号及其关键字参数：

**ENERGY_BALANCE_MAX_ITER**

 表示能量平衡的不动点迭代在 `maxiter` 次后仍未满足收敛条件::

     self._send_signal(signal=signals.energy_balance_max_iter, sender=<ModelList>,
                       status=<Status>, iterations=<int>)

 `signals.energy_balance_max_iter` 的关键字参数:

    * status: 未收敛的时间步的 Status，其中保存着最后一次迭代的值
    * iterations: 已执行的迭代次数

**PHOTOSYNTHESIS_MAX_ITER**

 表示迭代耦合的光合作用模型（FvcbIter）在 `iter_A_max` 次后仍未满足收敛条件::

     self._send_signal(signal=signals.photosynthesis_max_iter, sender=<ModelList>,
                       status=<Status>, iterations=<int>)

 关键字参数与 ENERGY_BALANCE_MAX_ITER 相同。

.. _PyDispatcher: http://pydispatcher.sourceforge.net/
"""

energy_balance_max_iter = "ENERGY_BALANCE_MAX_ITER"
photosynthesis_max_iter = "PHOTOSYNTHESIS_MAX_ITER"
