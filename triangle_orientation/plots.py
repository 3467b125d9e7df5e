
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def orientation_hist_plot(pairs, result, save_to):
    keys = np.array(list(pairs.keys()), dtype=float)
    fig = plt.figure(figsize=(6,3.2))
    plt.hist(keys, bins=max(10, min(120, keys.size)), alpha=0.6, label="all pairs")
    win = result.buckets.get(result.bucket_id, [])
    if win:
        plt.hist(win, bins=max(5, min(60, len(win))), alpha=0.8, label=f"bucket {result.bucket_id}")
    plt.axvline(result.orientation, linestyle="--", color="k")
    plt.xlabel("Orientation difference (deg)"); plt.ylabel("Pairs")
    plt.title(f"Estimated orientation {result.orientation:.3f} deg (support {result.support})")
    plt.legend(fontsize=7); plt.grid(True); fig.tight_layout(); fig.savefig(save_to, dpi=150); plt.close(fig)

def point_sets_plot(points1, points2, theta_deg, save_to):
    from .utils import rotate_points
    P1 = np.asarray(points1, dtype=float); P2 = np.asarray(points2, dtype=float)
    P2r = rotate_points(P2, theta_deg, center=P2.mean(axis=0)) - P2.mean(axis=0) + P1.mean(axis=0)
    fig = plt.figure(figsize=(4.6,4.4))
    plt.scatter(P1[:,0], P1[:,1], s=18, label="first")
    plt.scatter(P2r[:,0], P2r[:,1], s=30, marker="x", label="second, rotated by estimate")
    plt.gca().set_aspect("equal"); plt.title(f"Point sets, {theta_deg:.2f} deg")
    plt.legend(fontsize=7); fig.tight_layout(); fig.savefig(save_to, dpi=150); plt.close(fig)
