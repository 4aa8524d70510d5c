# Prints derived stats, scores and rewards for a range of transaction counts,
# for tuning the heuristic tables.
# Usage example:
# python scripts/saturation_table.py --tx-counts 10 100 1200 5000 --balance 0.2
import argparse

from reward_estimator.rewards import map_score_to_rewards
from reward_estimator.scoring import ActivityScorer
from reward_estimator.stats import derive_stats

DEFAULT_TX_COUNTS = [0, 1, 10, 50, 100, 250, 500, 1000, 1200, 2500, 5000]

def build_rows(tx_counts, balance):
    """Compute one table row per transaction count"""
    scorer = ActivityScorer()
    rows = []
    for tx_count in tx_counts:
        stats = derive_stats(tx_count, balance)
        scores = scorer.compute_scores(
            tx_count, stats.active_days, stats.protocols, stats.volume_usd, stats.recency_days
        )
        rows.append((
            tx_count,
            stats.active_days,
            stats.volume_usd,
            stats.protocols,
            stats.recency_days,
            scores.final_score,
            map_score_to_rewards(scores.final_score),
        ))
    return rows

def main():
    parser = argparse.ArgumentParser(description='Print the activity model tuning table')
    parser.add_argument('--tx-counts', type=int, nargs='+', default=DEFAULT_TX_COUNTS,
                        help='Transaction counts to evaluate')
    parser.add_argument('--balance', type=float, default=0.0, help='Native balance in ETH')
    args = parser.parse_args()

    header = ('txs', 'days', 'volume', 'protos', 'recency', 'score', 'reward')
    print("{:>8} {:>6} {:>10} {:>7} {:>8} {:>7} {:>8}".format(*header))
    for row in build_rows(args.tx_counts, args.balance):
        print("{:>8} {:>6} {:>10} {:>7} {:>8} {:>7.3f} {:>8}".format(*row))

if __name__ == "__main__":
    main()
