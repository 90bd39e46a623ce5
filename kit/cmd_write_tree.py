from kit.cmd_base import Base


class WriteTree(Base):
    def run(self) -> None:
        if self.args:
            self.eprintln("usage: kit write-tree")
            self.exit(129)

        oid = self.repo.tree_builder().build()
        self.println(str(oid))
