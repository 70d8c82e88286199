import time

import numpy as np

try:
    from pcut.quantize import quantize
except ImportError as e:
    print(f"Error importing from pcut.quantize: {e}")
    raise SystemExit(1)

# ---- Configuration ----
N_ITERATIONS = 20
N_PIXELS = 250_000  # e.g. a 500x500 buffer
MAX_DEPTH = 4
SEED = 42


def run_benchmark():
    print(f"--- Starting Benchmark for quantize ---")
    print(f"Number of iterations: {N_ITERATIONS}")
    print(f"Pixels per buffer: {N_PIXELS}, max depth: {MAX_DEPTH} ({2 ** MAX_DEPTH} colors)")

    rng = np.random.default_rng(SEED)
    durations = []

    for i in range(N_ITERATIONS):
        dummy_pixels = rng.integers(0, 256, size=(N_PIXELS, 4), dtype=np.uint8)

        start_time = time.perf_counter()
        palette = quantize(dummy_pixels, MAX_DEPTH)
        duration = time.perf_counter() - start_time
        durations.append(duration)

        print_interval = max(1, N_ITERATIONS // 10)
        if (i + 1) % print_interval == 0:
            print(f"  Iteration {i+1}/{N_ITERATIONS} done. First color: {palette[0].to_css()}. Time: {duration:.6f}s")

    total_time = sum(durations)
    avg_time = total_time / N_ITERATIONS
    throughput = N_ITERATIONS / total_time if total_time > 0 else float('inf')

    print("\n--- Benchmark Results Summary ---")
    print(f"Total time: {total_time:.4f} seconds")
    print(f"Average time per call: {avg_time:.6f} seconds ({avg_time*1000:.3f} ms)")
    print(f"Min time per call: {min(durations):.6f} seconds")
    print(f"Max time per call: {max(durations):.6f} seconds")
    print(f"Throughput: {throughput:.2f} calls/second")


if __name__ == "__main__":
    run_benchmark()
