"""
Export utilities for generating CSV, Excel, and PDF reports.
"""
import csv
import io
from datetime import date, datetime
from decimal import Decimal

import openpyxl
from django.http import HttpResponse
from django.utils import timezone
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

HEADER_COLOR = 'DDEEFF'


class ExportService:
    """Renders report rows as downloadable files."""

    FORMATS = ('csv', 'excel', 'pdf')

    @classmethod
    def export(cls, export_format, data, filename, columns=None, title=None):
        """Dispatch to the renderer for `export_format`."""
        if export_format == 'excel':
            return cls.to_excel(data, filename, columns, sheet_name=(title or filename)[:31])
        if export_format == 'pdf':
            return cls.to_pdf(data, filename, columns, title=title)
        return cls.to_csv(data, filename, columns)

    @staticmethod
    def _resolve_columns(data, columns):
        if columns is None and data:
            return [(k, k) for k in data[0].keys()]
        return columns or []

    @staticmethod
    def to_csv(data, filename, columns=None):
        """
        Export data to CSV format.

        Args:
            data: List of dictionaries
            filename: Output filename (without extension)
            columns: List of column definitions [(key, header), ...]
                     If None, uses dict keys as both key and header
        """
        response = HttpResponse(content_type='text/csv; charset=utf-8')
        response['Content-Disposition'] = f'attachment; filename="{filename}.csv"'
        # BOM so spreadsheet apps pick up UTF-8
        response.write('\ufeff')

        columns = ExportService._resolve_columns(data, columns)
        if not columns:
            return response

        writer = csv.writer(response)
        writer.writerow([header for _, header in columns])
        for row in data:
            writer.writerow([
                ExportService._format_value(row.get(key, ''))
                for key, _ in columns
            ])

        return response

    @staticmethod
    def to_excel(data, filename, columns=None, sheet_name='Reporte'):
        """
        Export data to an .xlsx workbook with a styled header row.
        """
        workbook = openpyxl.Workbook()
        sheet = workbook.active
        sheet.title = sheet_name

        columns = ExportService._resolve_columns(data, columns)

        header_font = Font(bold=True)
        header_fill = PatternFill(start_color=HEADER_COLOR, end_color=HEADER_COLOR, fill_type='solid')

        for col_idx, (_, header) in enumerate(columns, start=1):
            cell = sheet.cell(row=1, column=col_idx, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal='center')

        for row_idx, row in enumerate(data, start=2):
            for col_idx, (key, _) in enumerate(columns, start=1):
                value = ExportService._format_value(row.get(key, ''))
                sheet.cell(row=row_idx, column=col_idx, value=value)

        for col_idx, (key, header) in enumerate(columns, start=1):
            max_length = len(str(header))
            for row in data:
                max_length = max(max_length, len(str(row.get(key, ''))))
            sheet.column_dimensions[get_column_letter(col_idx)].width = min(max_length + 2, 50)

        output = io.BytesIO()
        workbook.save(output)

        response = HttpResponse(output.getvalue(), content_type=XLSX_CONTENT_TYPE)
        response['Content-Disposition'] = f'attachment; filename="{filename}.xlsx"'
        return response

    @staticmethod
    def to_pdf(data, filename, columns=None, title=None):
        """
        Export data to a landscape A4 PDF table.
        """
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=landscape(A4),
            rightMargin=30,
            leftMargin=30,
            topMargin=30,
            bottomMargin=30
        )

        elements = []
        styles = getSampleStyleSheet()

        if title:
            title_style = ParagraphStyle(
                'ReportTitle',
                parent=styles['Heading1'],
                fontSize=16,
                spaceAfter=12
            )
            elements.append(Paragraph(title, title_style))
            elements.append(Spacer(1, 12))

        columns = ExportService._resolve_columns(data, columns)

        if data and columns:
            table_data = [[header for _, header in columns]]
            for row in data:
                table_data.append([
                    str(ExportService._format_value(row.get(key, '')))
                    for key, _ in columns
                ])

            page_width = landscape(A4)[0] - 60
            col_width = page_width / len(columns)

            table = Table(table_data, colWidths=[col_width] * len(columns))
            table.setStyle(TableStyle([
                ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor(f'#{HEADER_COLOR}')),
                ('TEXTCOLOR', (0, 0), (-1, 0), colors.black),
                ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
                ('FONTSIZE', (0, 0), (-1, 0), 10),
                ('FONTSIZE', (0, 1), (-1, -1), 8),
                ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
                ('TOPPADDING', (0, 0), (-1, 0), 8),
                ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
                ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#F5F5F5')])
            ]))
            elements.append(table)
        else:
            elements.append(Paragraph('Sin datos para el período seleccionado.', styles['Normal']))

        elements.append(Spacer(1, 12))
        timestamp = timezone.localtime().strftime('%Y-%m-%d %H:%M:%S')
        elements.append(Paragraph(f'Generado: {timestamp}', styles['Normal']))

        doc.build(elements)

        response = HttpResponse(buffer.getvalue(), content_type='application/pdf')
        response['Content-Disposition'] = f'attachment; filename="{filename}.pdf"'
        return response

    @staticmethod
    def _format_value(value):
        """Format value for export."""
        if value is None:
            return ''
        if isinstance(value, datetime):
            if timezone.is_aware(value):
                value = timezone.localtime(value)
            return value.strftime('%Y-%m-%d %H:%M:%S')
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, bool):
            return 'Sí' if value else 'No'
        if isinstance(value, Decimal):
            return float(value)
        return value
