# backend/patternbook/examples/creational/builder.py
"""
Builder - Custom computer configurations

Q: A computer has a required CPU and RAM plus several optional parts. How
do you assemble it step by step and refuse to produce an invalid machine?
"""

import re
from dataclasses import dataclass
from typing import List, Optional


RAM_PATTERN = re.compile(r"(\d+)GB")
MIN_RAM_GB = 4


@dataclass
class Computer:
    """Product"""
    cpu: str
    ram: str
    storage: Optional[str] = None
    gpu: Optional[str] = None

    def describe(self) -> str:
        parts = [f"CPU={self.cpu}", f"RAM={self.ram}"]
        if self.storage:
            parts.append(f"Storage={self.storage}")
        if self.gpu:
            parts.append(f"GPU={self.gpu}")
        return ", ".join(parts)


class ComputerBuilder:
    """
    Fluent builder. Every ``with_*`` call returns the builder so steps can
    be chained; ``build()`` validates before creating the product.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> "ComputerBuilder":
        self._cpu: Optional[str] = None
        self._ram: Optional[str] = None
        self._storage: Optional[str] = None
        self._gpu: Optional[str] = None
        return self

    def with_cpu(self, cpu: str) -> "ComputerBuilder":
        self._cpu = cpu
        return self

    def with_ram(self, ram: str) -> "ComputerBuilder":
        self._ram = ram
        return self

    def with_storage(self, storage: str) -> "ComputerBuilder":
        self._storage = storage
        return self

    def with_gpu(self, gpu: str) -> "ComputerBuilder":
        self._gpu = gpu
        return self

    def validation_errors(self) -> List[str]:
        errors = []
        if not self._cpu or not self._cpu.strip():
            errors.append("CPU is required")

        match = RAM_PATTERN.fullmatch(self._ram or "")
        if not match:
            errors.append(f"RAM must look like '<n>GB', got {self._ram!r}")
        elif int(match.group(1)) < MIN_RAM_GB:
            errors.append(f"RAM must be at least {MIN_RAM_GB}GB, got {self._ram}")
        return errors

    def is_valid(self) -> bool:
        return not self.validation_errors()

    def build(self) -> Computer:
        errors = self.validation_errors()
        if errors:
            raise ValueError("Invalid computer configuration: " + "; ".join(errors))
        computer = Computer(cpu=self._cpu, ram=self._ram, storage=self._storage, gpu=self._gpu)
        print(f"Built computer: {computer.describe()}")
        return computer


class Director:
    """Knows the recipes for common configurations"""

    def build_office_pc(self, builder: ComputerBuilder) -> Computer:
        return builder.reset().with_cpu("Intel i5").with_ram("8GB").with_storage("256GB SSD").build()

    def build_gaming_pc(self, builder: ComputerBuilder) -> Computer:
        return (
            builder.reset()
            .with_cpu("AMD Ryzen 9")
            .with_ram("32GB")
            .with_storage("2TB NVMe")
            .with_gpu("RTX 4080")
            .build()
        )


def demo() -> dict:
    builder = ComputerBuilder()
    director = Director()
    office = director.build_office_pc(builder)
    gaming = director.build_gaming_pc(builder)

    rejected = None
    try:
        builder.reset().with_cpu("Intel i3").with_ram("2GB").build()
    except ValueError as e:
        rejected = str(e)
        print(f"Rejected: {rejected}")

    return {
        "office": office.describe(),
        "gaming": gaming.describe(),
        "rejected": rejected,
    }
