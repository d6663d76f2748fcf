class System:
    def setup(self):
        raise NotImplementedError(f"Child system MUST implement {self.setup.__name__}")

    def run(self, world):
        raise NotImplementedError(f"Child system MUST implement {self.run.__name__}")
