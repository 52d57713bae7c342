#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of wildforge

Match a path against a template, then use the extracted wildcards to derive
companion paths, the way a build rule finds the inputs of a requested output.
"""
import sys
sys.path.insert(0, "../src")

from wildforge import MissingNameError, WildcardRule, Workflow, compile_pattern

print("=" * 80)
print("QUICK START EXAMPLES")
print("=" * 80)

# ============================================================================
# EXAMPLE 1: Extract wildcards from a path
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 1: Extract and render")
print("=" * 80)

pattern = compile_pattern("build/{stem}.{ext,o|d}")
for path in ["build/main.o", "build/util.d", "build/main.c"]:
    wildcards = pattern.extract(path)
    if wildcards is None:
        print(f"  ✗ {path}")
    else:
        print(f"  ✓ {path} -> {dict(wildcards)}")
        print(f"      source: {wildcards.render('src/{stem}.c')}")

# ============================================================================
# EXAMPLE 2: Repeated wildcards must agree
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 2: Repeated wildcards")
print("=" * 80)

pattern = compile_pattern("reports/{year,\\d{4}}/{year}-summary.pdf")
print(f"  reports/2024/2024-summary.pdf -> {pattern.extract('reports/2024/2024-summary.pdf')}")
print(f"  reports/2024/2023-summary.pdf -> {pattern.extract('reports/2024/2023-summary.pdf')}")

# ============================================================================
# EXAMPLE 3: Rules
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 3: Rules and workflows")
print("=" * 80)

workflow = Workflow()


@workflow.rule(outputs=["build/{stem}.o", "build/{stem}.d"], inputs=["src/{stem}.c"])
def compile_object(inputs, outputs, wildcards):
    return f"cc -c {inputs[0]} -o {outputs[0]} -MF {outputs[1]}"


workflow.add_rule(WildcardRule(inputs=["data/{name}.csv"], outputs=["plots/{name}.png"], name="plot"))

for target in ["build/main.d", "plots/sales.png", "README.md"]:
    task = workflow.materialize(target)
    if task is None:
        print(f"\n  {target}: no rule")
        continue
    print(f"\n  {target}: {task.rule}")
    print(f"    inputs:  {list(task.inputs)}")
    print(f"    outputs: {list(task.outputs)}")
    if task.action is not None:
        print(f"    command: {task.run()}")

try:
    WildcardRule(inputs=["src/{stem}/{variant}.c"], outputs=["build/{stem}.o"]).materialize("build/main.o")
except MissingNameError as exc:
    print(f"\n  misconfigured rule: {exc}")
