'''
Output of points, triangles and edges as WKT to text files (for QGIS)
'''


def output_points(points, fh):
    """Output list of points as WKT to text file"""
    fh.write("id;wkt;constraints\n")
    for p in points:
        fh.write("{0};POINT({1});{2}\n".format(id(p), p, len(p.edges)))


def output_triangles(triangles, fh):
    """Output list of triangles as WKT to text file"""
    fh.write("id;wkt;n0;n1;n2;c0;c1;c2;interior\n")
    for t in triangles:
        if t is None:
            continue
        fh.write("{0};{1};"
                 "{2[0]};{2[1]};{2[2]};"
                 "{3[0]};{3[1]};{3[2]};"
                 "{4}\n".format(
                     id(t), t,
                     [id(n) if n is not None else None for n in t.neighbours],
                     t.constrained,
                     t.interior))


def output_edges(edges, fh):
    """Output edges (e.g. from an EdgeIterator) as WKT to text file"""
    fh.write("id;side;constrained;wkt\n")
    for e in edges:
        fh.write("{0};{1};{2};"
                 "LINESTRING({3[0]}, {3[1]})\n".format(
                     id(e.triangle), e.side, e.constrained, e.segment))
