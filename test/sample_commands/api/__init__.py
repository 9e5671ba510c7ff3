from courier import CommandCallable


class NoNamespacesOneParamCommand(CommandCallable):
    def __init__(self, param):
        self.param = param

    def call(self):
        if self.param == "param":
            return True
        self.errors.add("invalid_parameter", "Parameter is invalid")
        return None
