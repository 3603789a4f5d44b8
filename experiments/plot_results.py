import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

sns.set_theme(style="whitegrid")
plt.rcParams.update({'font.size': 12})

NUMERIC_COLUMNS = ['server_time_ms', 'invocation_latency_ms', 'locust_response_time']


def load_results(file_path):
    df = pd.read_csv(file_path)

    df = df[~df['status_code'].astype(str).str.startswith('FAILED')].copy()
    for column in NUMERIC_COLUMNS:
        df[column] = pd.to_numeric(df[column], errors='coerce')

    # a row is useful only if the server reported something
    df = df.dropna(subset=['server_time_ms', 'invocation_latency_ms'], how='all')
    return df.sort_values('timestamp')


def summarize(df):
    stats = df.groupby(['platform', 'function']).agg(
        requests=('timestamp', 'count'),
        avg_server_time=('server_time_ms', 'mean'),
        median_server_time=('server_time_ms', 'median'),
        p95_server_time=('server_time_ms', lambda x: x.quantile(0.95)),
        avg_latency=('invocation_latency_ms', 'mean'),
        p95_latency=('invocation_latency_ms', lambda x: x.quantile(0.95)),
    )
    return stats.round(2)


def plot_server_time(df):
    # --- GRAPH 1: Prime benchmark compute time per platform ---
    primes = df[df['function'] == 'prime']

    plt.figure(figsize=(10, 6))
    sns.boxplot(data=primes, x='platform', y='server_time_ms', hue='platform', palette='muted')
    plt.xlabel('Platform')
    plt.ylabel('Compute time (ms)')
    plt.title('Prime counting benchmark: compute time per platform')
    plt.tight_layout()
    plt.savefig('grafico_compute_time.png')
    plt.show()


def plot_invocation_latency(df):
    # --- GRAPH 2: Cold start probe latency over time ---
    probes = df[df['function'] == 'cold_start'].copy()
    probes['request_id'] = probes.groupby('platform').cumcount() + 1

    g = sns.relplot(
        data=probes,
        x='request_id',
        y='invocation_latency_ms',
        hue='platform',
        kind='line',
        height=5,
        aspect=1.6,
        linewidth=2,
    )
    g.set_axis_labels("Request", "Invocation latency (ms)")
    g.fig.suptitle('Cold start probe: invocation latency', y=1.03)
    plt.savefig('grafico_latency.png')
    plt.show()


def plot_cumulative_compute(df):
    # --- GRAPH 3: Cumulative compute time (monotonic curves) ---
    primes = df[df['function'] == 'prime'].dropna(subset=['server_time_ms'])

    plt.figure(figsize=(10, 6))
    for platform, group in primes.groupby('platform'):
        request_id = np.arange(1, len(group) + 1)
        cumulative_s = np.cumsum(group['server_time_ms'].to_numpy()) / 1000.0
        plt.plot(request_id, cumulative_s, label=platform, linewidth=2.5)

    plt.xlabel('Completed requests')
    plt.ylabel('Cumulative compute time (s)')
    plt.title('Cumulative compute time per platform')
    plt.legend(title='Platform')
    plt.tight_layout()
    plt.savefig('grafico_cumulativo.png')
    plt.show()


def analyze_experiment(file_path):
    df = load_results(file_path)

    plot_server_time(df)
    plot_invocation_latency(df)
    plot_cumulative_compute(df)

    print("\n" + "=" * 60)
    print("BENCHMARK RESULTS")
    print("=" * 60)
    print(summarize(df))

    for run_label, group in df.groupby('run_label'):
        print(f"Run: {run_label}")
        print(f"  - Total Requests: {len(group)}")
        print(f"  - Average Response Time (client): {group['locust_response_time'].mean():.2f} ms")
        print("-" * 30)


if __name__ == "__main__":
    analyze_experiment('experiment_results.csv')
