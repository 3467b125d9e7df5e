
import numpy as np

# ---------- Angles ----------
def wrap_deg(a):
    # into [-180, 180)
    return (np.asarray(a, dtype=float) + 180.0) % 360.0 - 180.0

def rot2d(theta_deg):
    th = np.deg2rad(theta_deg)
    c, s = np.cos(th), np.sin(th)
    return np.array([[c,-s],[s,c]])

def rotate_points(pts, theta_deg, center=None):
    P = np.asarray(pts, dtype=float).reshape(-1,2)
    c = np.zeros(2) if center is None else np.asarray(center, dtype=float)
    return (P - c) @ rot2d(theta_deg).T + c

# ---------- Polygon / triangle geometry ----------
def shoelace_sum(poly):
    """sum over edges of (x_next - x_cur)*(y_next + y_cur); > 0 means clockwise."""
    P = np.asarray(poly, dtype=float)
    Q = np.roll(P, -1, axis=0)
    return float(np.sum((Q[:,0]-P[:,0])*(Q[:,1]+P[:,1])))

def interior_angles_deg(tri):
    P = np.asarray(tri, dtype=float)
    ang = np.empty(3)
    for i in range(3):
        a = P[(i+1)%3] - P[i]; b = P[(i+2)%3] - P[i]
        cosv = (a@b)/(np.linalg.norm(a)*np.linalg.norm(b)+1e-15)
        ang[i] = np.rad2deg(np.arccos(np.clip(cosv, -1, 1)))
    return ang

def bearings_deg(tri):
    P = np.asarray(tri, dtype=float)
    d = P - P.mean(axis=0)
    return np.rad2deg(np.arctan2(d[:,1], d[:,0]))

def orientation_average_deg(tri):
    """Mean centroid->vertex bearing, unwrapped about vertex 0, in [0, 360)."""
    b = bearings_deg(tri)
    rel = wrap_deg(b - b[0])
    return float((b[0] + rel.mean()) % 360.0)

def is_collinear(tri, tol=1e-9):
    P = np.asarray(tri, dtype=float)
    a = P[1]-P[0]; b = P[2]-P[0]
    cross = a[0]*b[1] - a[1]*b[0]
    edges = np.linalg.norm(P - np.roll(P, -1, axis=0), axis=1)
    return bool(abs(cross) <= tol*max(float(edges.max())**2, 1e-300))
