# RUN: python examples/01_basic_tracing.py
"""Basic tracing — start a root span and a child, tag them, finish them.

Demonstrates: Tracer, ConsoleReporter, child_of, baggage, and the
exactly-once finish (the second finish() below reports nothing).
"""

from wavefront_opentracing import (
    ConsoleReporter,
    Tracer,
    TracerConfig,
    configure_logging,
)


def main() -> None:
    configure_logging("INFO", json=False)

    config = TracerConfig(application="shop", service="checkout")
    with Tracer(ConsoleReporter(), config) as tracer:
        root = tracer.start_span("checkout")
        root.set_baggage_item("customer", "c-42")

        child = tracer.start_span("charge_card", child_of=root, tags={"amount": 1999})
        print("child sees baggage:", child.get_baggage_item("customer"))
        child.finish()

        root.set_tag("items", 3)
        root.finish()
        root.finish()


if __name__ == "__main__":
    main()
