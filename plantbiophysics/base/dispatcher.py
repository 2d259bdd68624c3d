# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
from pydispatch import dispatcher


class DispatcherObject(object):
    """该类只定义了 _send_signal() 方法。

    该类只用于继承，不应被直接使用。与模拟对象不同，模型的参数结构在多个对象之间共享，
    因此信号的发送者不是模型本身，而是调用时传入的模拟对象（通常是一个 ModelList）。
    """

    def _send_signal(self, signal, sender, *args, **kwargs):
        """使用 dispatcher 模块发送 <signal>，发送者为 <sender>。

        传递给 _send_signal() 方法的附加参数会传递给 dispatcher.send()。
        """

        self.logger.debug("Sent signal: %s" % signal)
        dispatcher.send(signal=signal, sender=sender, *args, **kwargs)
